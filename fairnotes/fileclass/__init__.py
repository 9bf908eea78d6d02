"""
fileClass schema handling.

Reads the YAML front matter of the template's fileClass note, reports
the user-defined field names, and appends the generated output fields.
"""

from .frontmatter import join_front_matter, split_front_matter  # noqa: F401
from .ids import legacy_ids, unique_ids  # noqa: F401
from .merge import MergeResult, load_schema, merge_schema, user_field_names  # noqa: F401
