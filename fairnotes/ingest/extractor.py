"""
Employer export to `Company` records.

The career-fair export is a JSON object whose ``results`` array holds
one entry per employer.  Each entry nests the employer's identity under
``employer`` and lists job types, majors, school years and attended
sessions as arrays of objects.  This module projects a fixed set of
those fields into immutable `Company` records.

Validation is all-or-nothing by default: the first entry with a
missing or mistyped field raises `InputFormatError` naming the field
and the entry's index, and no records are returned.  With
``skip_invalid=True`` bad entries are logged and dropped instead.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..errors import InputFormatError
from .company import Company

logger = logging.getLogger(__name__)

# (attribute, logical field name, path into the entry)
SCALAR_FIELDS: Sequence[Tuple[str, str, Tuple[str, ...]]] = (
    ("name", "name", ("employer", "name")),
    ("description", "description", ("company_description",)),
    ("location", "location", ("location_name",)),
    ("website", "website", ("employer", "website")),
    ("logo_url", "logo_url", ("employer", "logo_url")),
    ("work_authorization", "work_auth", ("work_authorization_requirements",)),
    ("job_titles", "job_titles", ("job_titles",)),
)

# (attribute, array field name, element field name, source key, element key)
LIST_FIELDS: Sequence[Tuple[str, str, str, str, str]] = (
    ("job_types", "job_types", "job_type", "job_types", "name"),
    ("majors", "majors", "major", "majors", "name"),
    ("school_years", "school_years", "school_year", "school_years", "name"),
    ("attending_sessions", "sessions", "session", "attending_career_fair_sessions", "display_name"),
)


def load_input(path: str | Path) -> Any:
    """Read and parse the JSON export at `path`."""
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise InputFormatError(f"cannot read {path}: {exc.strerror or exc}") from exc
    try:
        return json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InputFormatError(f"failed parsing json: {exc}") from exc


def _lookup(entry: Any, path: Tuple[str, ...]) -> Any:
    value = entry
    for key in path:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def _string(value: Any, field: str, index: int) -> str:
    if value is None:
        raise InputFormatError("missing value", field=field, index=index)
    if not isinstance(value, str):
        raise InputFormatError(f"expected a string, got {type(value).__name__}", field=field, index=index)
    return value


def _strings(entry: Any, array_field: str, element_field: str, key: str, element_key: str, index: int) -> Tuple[str, ...]:
    items = _lookup(entry, (key,))
    if not isinstance(items, list):
        raise InputFormatError("expected an array", field=array_field, index=index)
    return tuple(_string(_lookup(item, (element_key,)), element_field, index) for item in items)


def extract_company(entry: Any, index: int) -> Company:
    """Build one `Company` from a single ``results`` element."""
    values: Dict[str, Any] = {}
    for attr, field, path in SCALAR_FIELDS:
        values[attr] = _string(_lookup(entry, path), field, index)
    for attr, array_field, element_field, key, element_key in LIST_FIELDS:
        values[attr] = _strings(entry, array_field, element_field, key, element_key, index)
    return Company(**values)


def extract_companies(document: Any, *, skip_invalid: bool = False) -> List[Company]:
    """Extract every employer entry in `document`.

    Args:
        document: Parsed JSON export.
        skip_invalid: Drop entries that fail validation rather than
            aborting the whole batch.

    Returns:
        Companies in the same order as ``document["results"]``.

    Raises:
        InputFormatError: The document has no ``results`` array, or an
            entry is invalid and `skip_invalid` is false.
    """
    entries: Optional[Any] = document.get("results") if isinstance(document, dict) else None
    if not isinstance(entries, list):
        raise InputFormatError("invalid json data: expected an object with a 'results' array")

    companies: List[Company] = []
    for index, entry in enumerate(entries):
        try:
            companies.append(extract_company(entry, index))
        except InputFormatError as exc:
            if not skip_invalid:
                raise
            logger.warning("Skipping entry %d: %s", index, exc)
    logger.debug("Extracted %d of %d entries", len(companies), len(entries))
    return companies
