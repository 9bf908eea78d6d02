"""
Vault output for fairnotes.

Copies a vault template, writes the merged fileClass schema into the
copy and fills its ``companies`` directory with rendered notes.
"""

from .builder import build_vault, prepare_schema  # noqa: F401
from .writer import WriteReport, copy_template, write_notes, write_schema  # noqa: F401
