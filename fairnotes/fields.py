"""
Output columns shared by the schema merger and the note renderer.

`OUTPUT_FIELDS` is the ordered list of front-matter keys each company
note carries after the template's own fields.  The merger appends one
field descriptor per entry, in this order, to the template's fileClass;
the renderer emits one line per entry, in this order, for every note.
Keep the two in step by editing only this tuple.
"""

from __future__ import annotations

from typing import Tuple

OUTPUT_FIELDS: Tuple[str, ...] = (
    "location",
    "majors",
    "job_titles",
    "job_types",
    "school_years",
    "international",
    "sessions",
    "website",
)

FILE_CLASS = "company"
