"""
Company note rendering.

A note is YAML front matter (the fileClass marker, blank placeholders
for the template's own fields, then one line per generated column)
followed by a short Markdown body with the employer's logo and
description.  Rendering is pure; writing is the vault writer's job.
"""

from __future__ import annotations

from typing import Iterable, List

import yaml  # type: ignore

from ..fields import FILE_CLASS, OUTPUT_FIELDS
from ..ingest.company import Company

FALLBACK_WARNING = (
    "> [!warning] This note could not be saved under the company's name "
    "and was written to a fallback file."
)


def _value_line(key: str, value: str, escape: bool) -> str:
    # empty values stay blank rather than becoming '' or null
    if not value:
        return f"{key}: "
    if not escape:
        return f"{key}: {value}"
    dumped = yaml.safe_dump(
        {key: value}, allow_unicode=True, default_flow_style=False, width=float("inf")
    )
    return dumped.rstrip("\n")


def render_note(company: Company, user_fields: Iterable[str], *, escape: bool = True) -> str:
    """Return the full text of `company`'s note.

    Args:
        company: Record to render.
        user_fields: Field names from the template's fileClass, emitted
            as empty placeholders in order.
        escape: Quote front-matter values that would not survive as
            plain YAML scalars.  ``False`` interpolates them verbatim.
    """
    values = company.front_matter_values()
    lines: List[str] = ["---", f"fileClass: {FILE_CLASS}"]
    lines.extend(f"{name}: " for name in user_fields)
    lines.extend(_value_line(key, values[key], escape) for key in OUTPUT_FIELDS)
    lines.extend([
        "---",
        "",
        f'<img src="{company.logo_url}" style="width: 80px;">',
        "",
        "### Description",
        "",
        company.description,
    ])
    return "\n".join(lines) + "\n"


def render_fallback_note(company: Company, user_fields: Iterable[str], *, escape: bool = True) -> str:
    """Note text for the ``error<N>.md`` fallback, naming the company."""
    text = render_note(company, user_fields, escape=escape)
    return f"{text}\n{FALLBACK_WARNING}\n> Company name: {company.name}\n"
