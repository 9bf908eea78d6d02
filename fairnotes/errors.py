"""
Exception hierarchy for fairnotes.

Every failure the command line reports to the user is a subclass of
`FairnotesError`.  Lower-level exceptions (``OSError``,
``json.JSONDecodeError``, ``yaml.YAMLError``) are wrapped at the module
boundary that raised them so the CLI can print a single line.
"""

from __future__ import annotations

from typing import Optional


class FairnotesError(Exception):
    """Base class for all errors raised by fairnotes."""


class ArgumentError(FairnotesError):
    """Malformed command-line or configuration input."""

    def __str__(self) -> str:
        return f"Argument error: {super().__str__()}"


class InputFormatError(FairnotesError):
    """The employer JSON export is unreadable or has the wrong shape.

    `field` names the logical company field that failed (``None`` for
    document-level problems) and `index` is the zero-based position of
    the offending entry in ``results``.
    """

    def __init__(self, message: str, *, field: Optional[str] = None, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.field = field
        self.index = index

    def __str__(self) -> str:
        message = super().__str__()
        if self.field is None:
            return f"Input error: {message}"
        where = f" (entry {self.index})" if self.index is not None else ""
        return f"Input error: invalid field '{self.field}'{where}: {message}"


class TemplateError(FairnotesError):
    """The vault template or its fileClass schema cannot be used."""

    def __str__(self) -> str:
        return f"Template error: {super().__str__()}"


class OutputError(FairnotesError):
    """The output vault could not be created or written."""

    def __str__(self) -> str:
        return f"Output error: {super().__str__()}"
