"""
Record extraction for fairnotes.

This package reads the career-fair JSON export and turns each employer
entry into an immutable `Company` record.  `extract_companies` is the
entry point; `load_input` reads and decodes the export file.
"""

from .company import Company  # noqa: F401
from .extractor import extract_companies, extract_company, load_input  # noqa: F401
