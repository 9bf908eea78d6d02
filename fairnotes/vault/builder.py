"""
End-to-end vault construction.

`prepare_schema` reads and merges the template's fileClass without
touching the output path, so a validate-only run exercises the same
checks as a real one.  `build_vault` then copies the template, swaps in
the merged schema and writes the company notes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from ..config import Settings
from ..errors import TemplateError
from ..fileclass.merge import MergeResult, merge_schema
from ..ingest.company import Company
from .writer import WriteReport, copy_template, write_notes, write_schema

logger = logging.getLogger(__name__)


def prepare_schema(settings: Settings) -> MergeResult:
    schema_file = Path(settings.template) / settings.schema_path
    try:
        raw = schema_file.read_bytes()
    except OSError as exc:
        raise TemplateError(f"cannot read schema {schema_file}: {exc.strerror or exc}") from exc
    merged = merge_schema(raw, id_strategy=settings.id_strategy, guard_remerge=settings.guard_remerge)
    logger.debug("Template defines %d user field(s): %s", len(merged.user_fields), merged.user_fields)
    return merged


def build_vault(companies: Sequence[Company], output_root: str | Path, settings: Settings) -> WriteReport:
    """Create a vault at `output_root` holding one note per company."""
    merged = prepare_schema(settings)
    copy_template(settings.template, output_root)
    write_schema(output_root, merged.text, settings.schema_path)
    report = write_notes(
        output_root,
        companies,
        merged.user_fields,
        companies_dir=settings.companies_dir,
        escape=settings.escape_values,
    )
    logger.info("Wrote %d note(s), %d to fallback files", report.total, len(report.fallbacks))
    return report
