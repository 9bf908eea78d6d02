# fairnotes/ingest/company.py
from dataclasses import dataclass, field
from typing import Tuple

@dataclass(frozen=True)
class Company:
    name: str
    description: str
    location: str
    website: str
    logo_url: str
    work_authorization: str
    job_titles: str                          # free text, not split
    job_types: Tuple[str, ...] = field(default_factory=tuple)
    majors: Tuple[str, ...] = field(default_factory=tuple)
    school_years: Tuple[str, ...] = field(default_factory=tuple)
    attending_sessions: Tuple[str, ...] = field(default_factory=tuple)  # display names

    def front_matter_values(self) -> dict:
        """Values for the output columns, sequences joined with ", "."""
        return {
            "location": self.location,
            "majors": ", ".join(self.majors),
            "job_titles": self.job_titles,
            "job_types": ", ".join(self.job_types),
            "school_years": ", ".join(self.school_years),
            "international": self.work_authorization,
            "sessions": ", ".join(self.attending_sessions),
            "website": self.website,
        }
