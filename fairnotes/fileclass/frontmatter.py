"""
YAML front matter boundaries.

A fileClass note is a Markdown file whose first line is ``---`` and
whose metadata runs until the next line consisting only of ``---`` (or
the YAML document-end marker ``...``).  Everything after that line is
the note body and is carried through unchanged.
"""

from __future__ import annotations

from typing import Tuple

from ..errors import TemplateError

DELIMITER = "---"
_CLOSERS = (DELIMITER, "...")


def split_front_matter(text: str) -> Tuple[str, str]:
    """Split `text` into ``(front_matter, body)``.

    Raises:
        TemplateError: The text does not open with a delimiter line or
            the front matter is never closed.
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != DELIMITER:
        raise TemplateError("schema file does not start with a '---' front matter delimiter")
    for i in range(1, len(lines)):
        if lines[i].rstrip() in _CLOSERS:
            return "".join(lines[1:i]), "".join(lines[i + 1:])
    raise TemplateError("front matter is not closed by a '---' delimiter")


def join_front_matter(front_matter: str, body: str = "") -> str:
    """Inverse of `split_front_matter` for serializer output."""
    if front_matter and not front_matter.endswith("\n"):
        front_matter += "\n"
    text = f"{DELIMITER}\n{front_matter}{DELIMITER}"
    if body:
        text += "\n" + body
    return text
