"""
Vault output.

These helpers own every write fairnotes performs: copying the template
tree, replacing the fileClass schema inside the copy, and writing one
note per company.  A note whose primary file cannot be created (for
example because the company name contains ``/``) is written to
``error<index>.md`` in the same directory instead; only a failure of
that fallback aborts the run.
"""

from __future__ import annotations

import logging
import re
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Sequence

from ..errors import OutputError, TemplateError
from ..ingest.company import Company
from ..render.note import render_fallback_note, render_note

logger = logging.getLogger(__name__)

_FALLBACK_NAME = re.compile(r"error\d+", re.IGNORECASE)


@dataclass
class WriteReport:
    """Paths written by `write_notes`."""

    written: List[Path] = field(default_factory=list)
    fallbacks: List[Path] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.written) + len(self.fallbacks)


def copy_template(template_root: str | Path, output_root: str | Path) -> None:
    """Copy the whole template tree to a new `output_root`."""
    template_root = Path(template_root)
    output_root = Path(output_root)
    if not template_root.is_dir():
        raise TemplateError(f"template directory not found: {template_root}")
    if output_root.exists():
        raise OutputError(f"output path already exists: {output_root}")
    try:
        shutil.copytree(template_root, output_root)
    except (OSError, shutil.Error) as exc:
        raise OutputError(f"failed copying template to {output_root}: {exc}") from exc
    logger.info("Copied template %s to %s", template_root, output_root)


def write_schema(output_root: str | Path, text: str, schema_path: str = "classes/company.md") -> Path:
    """Overwrite the copied fileClass schema with the merged `text`."""
    path = Path(output_root) / schema_path
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OutputError(f"failed writing schema {path}: {exc}") from exc
    logger.debug("Wrote schema %s", path)
    return path


def _note_filename(name: str) -> str:
    # names that are not a single path component go to the fallback
    if not name or name in (".", "..") or Path(name).name != name or "\\" in name or "\x00" in name:
        raise OSError(f"not a valid file name: {name!r}")
    if _FALLBACK_NAME.fullmatch(name):
        raise OSError(f"name is reserved for fallback notes: {name!r}")
    return f"{name}.md"


def write_notes(
    output_root: str | Path,
    companies: Sequence[Company],
    user_fields: Iterable[str],
    *,
    companies_dir: str = "companies",
    escape: bool = True,
) -> WriteReport:
    """Write one note per company under ``output_root/companies_dir``.

    Notes are created exclusively, so a second company with the same
    name also lands in a fallback file rather than replacing the first.
    Names of the form ``error<N>`` are reserved for fallback files.

    Returns:
        `WriteReport`; its `total` always equals ``len(companies)``.

    Raises:
        OutputError: The notes directory cannot be created or a
            fallback write fails (including when the fallback file
            already exists).
    """
    user_fields = list(user_fields)
    notes_dir = Path(output_root) / companies_dir
    try:
        notes_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputError(f"failed creating {notes_dir}: {exc}") from exc

    report = WriteReport()
    for index, company in enumerate(companies):
        try:
            path = notes_dir / _note_filename(company.name)
            with open(path, "x", encoding="utf-8") as f:
                f.write(render_note(company, user_fields, escape=escape))
            report.written.append(path)
            logger.debug("Wrote %s", path)
            continue
        except OSError as exc:
            logger.debug("Failed writing note for %r: %s", company.name, exc)

        path = notes_dir / f"error{index}.md"
        try:
            with open(path, "x", encoding="utf-8") as f:
                f.write(render_fallback_note(company, user_fields, escape=escape))
        except OSError as exc:
            raise OutputError(f"failed writing fallback note {path}: {exc}") from exc
        report.fallbacks.append(path)
        logger.warning("Wrote note for %r to fallback %s", company.name, path.name)
    return report
