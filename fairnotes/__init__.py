"""
fairnotes turns a career-fair employer export into knowledge-base notes.

The flow is:

1. **ingest** – Read the JSON export and extract one immutable
   `Company` record per entry in ``results``.  Entries with missing or
   mistyped fields abort the run (or are skipped when configured).
2. **fileclass** – Parse the YAML front matter of the template's
   ``classes/company.md`` fileClass, collect the user's own field names
   and append the generated output fields.
3. **render** – Produce each company's note: front matter with blank
   placeholders for the user fields followed by the generated values,
   then a Markdown body with the logo and description.
4. **vault** – Copy the template, write the merged fileClass and the
   notes, falling back to ``error<N>.md`` when a company's name cannot
   be used as a file name.
5. **cli** – Command line entry point wiring the above together.
"""

from importlib import metadata

try:
    __version__ = metadata.version("fairnotes")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0"
