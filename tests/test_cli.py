"""
Unittest suite for the command line interface.

These tests run `fairnotes.cli.main` end to end against a temporary
template whose fileClass defines no user fields, and check the vault it
produces, the validate-only mode, and the exit codes for bad input.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from fairnotes.cli import main

ACME_EXPORT = {
    "results": [
        {
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
    ]
}


class TestCli(unittest.TestCase):
    """Test cases for the fairnotes command."""

    def setUp(self) -> None:
        self.temp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.temp_dir.name)
        self.template = self.root / "template"
        (self.template / "classes").mkdir(parents=True)
        (self.template / "classes" / "company.md").write_text(
            "---\nfields: []\nfieldsOrder: []\n---\n", encoding="utf-8"
        )
        self.input = self.root / "export.json"
        self.input.write_text(json.dumps(ACME_EXPORT), encoding="utf-8")
        self.output = self.root / "vault"

    def tearDown(self) -> None:
        self.temp_dir.cleanup()

    def _run(self, *extra: str) -> int:
        return main(["-i", str(self.input), "-t", str(self.template), *extra])

    def test_end_to_end(self) -> None:
        """The Acme export produces companies/Acme.md with every column."""
        self.assertEqual(self._run("-o", str(self.output)), 0)
        note = (self.output / "companies" / "Acme.md").read_text(encoding="utf-8")
        lines = note.splitlines()
        for expected in [
            "location: NYC",
            "majors: CS",
            "job_types: Intern",
            "school_years: Junior",
            "international: none",
            "sessions: Morning",
            "website: acme.com",
        ]:
            self.assertIn(expected, lines)
        body = note.split("### Description", 1)[1]
        self.assertEqual(body.strip(), "d")
        schema = (self.output / "classes" / "company.md").read_text(encoding="utf-8")
        self.assertIn("name: website", schema)

    def test_one_note_per_entry(self) -> None:
        entry = ACME_EXPORT["results"][0]
        names = ["Acme", "Beta/Gamma", "Delta"]
        results = []
        for name in names:
            e = json.loads(json.dumps(entry))
            e["employer"]["name"] = name
            results.append(e)
        self.input.write_text(json.dumps({"results": results}), encoding="utf-8")
        self.assertEqual(self._run("-o", str(self.output)), 0)
        files = sorted(p.name for p in (self.output / "companies").iterdir())
        self.assertEqual(files, ["Acme.md", "Delta.md", "error1.md"])

    def test_validate_only(self) -> None:
        with self.assertLogs("fairnotes.cli", level="INFO") as logs:
            self.assertEqual(self._run(), 0)
        self.assertFalse(self.output.exists())
        self.assertTrue(any("rendering data for 1 companies" in m for m in logs.output))

    def test_no_output_flag_wins(self) -> None:
        self.assertEqual(self._run("-o", str(self.output), "--no-output"), 0)
        self.assertFalse(self.output.exists())

    def test_invalid_input_exits_nonzero(self) -> None:
        self.input.write_text(json.dumps({"results": [{"employer": {}}]}), encoding="utf-8")
        with self.assertLogs("fairnotes.cli", level="ERROR") as logs:
            self.assertEqual(self._run("-o", str(self.output)), 1)
        self.assertIn("'name'", logs.output[0])
        self.assertFalse(self.output.exists())

    def test_existing_output_exits_nonzero(self) -> None:
        self.output.mkdir()
        with self.assertLogs("fairnotes.cli", level="ERROR"):
            self.assertEqual(self._run("-o", str(self.output)), 1)

    def test_bad_template_exits_nonzero(self) -> None:
        (self.template / "classes" / "company.md").write_text("fields: []\n", encoding="utf-8")
        with self.assertLogs("fairnotes.cli", level="ERROR"):
            self.assertEqual(self._run(), 1)

    def test_help_exits_cleanly(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            main(["-h"])
        self.assertEqual(ctx.exception.code, 0)

    def test_missing_input_is_usage_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            main(["-o", str(self.output)])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
