"""Note rendering for fairnotes."""

from .note import render_fallback_note, render_note  # noqa: F401
