"""Shared fixtures for the fairnotes test suite."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Callable, Dict

import pytest

from fairnotes.ingest.company import Company

ACME_ENTRY: Dict[str, object] = {
    "employer": {"name": "Acme", "website": "acme.com", "logo_url": "x.png"},
    "company_description": "d",
    "location_name": "NYC",
    "work_authorization_requirements": "none",
    "job_titles": "SWE",
    "job_types": [{"name": "Intern"}],
    "majors": [{"name": "CS"}],
    "school_years": [{"name": "Junior"}],
    "attending_career_fair_sessions": [{"display_name": "Morning"}],
}

EMPTY_SCHEMA = "---\nfields: []\nfieldsOrder: []\n---\n"


@pytest.fixture
def acme_entry() -> Dict[str, object]:
    """A fresh copy of a valid export entry for Acme."""
    return copy.deepcopy(ACME_ENTRY)


@pytest.fixture
def make_company() -> Callable[..., Company]:
    """Factory building a `Company` with Acme defaults."""

    def _make(**overrides: object) -> Company:
        values: Dict[str, object] = {
            "name": "Acme",
            "description": "d",
            "location": "NYC",
            "website": "acme.com",
            "logo_url": "x.png",
            "work_authorization": "none",
            "job_titles": "SWE",
            "job_types": ("Intern",),
            "majors": ("CS",),
            "school_years": ("Junior",),
            "attending_sessions": ("Morning",),
        }
        values.update(overrides)
        return Company(**values)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def empty_template(tmp_path: Path) -> Path:
    """Template directory whose fileClass has no user fields."""
    root = tmp_path / "template"
    (root / "classes").mkdir(parents=True)
    (root / "classes" / "company.md").write_text(EMPTY_SCHEMA, encoding="utf-8")
    (root / "Home.md").write_text("# Home\n", encoding="utf-8")
    return root
