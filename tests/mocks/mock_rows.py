"""Factory functions returning ORM rows for database tests."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

from talent_match_infra.db.models import CandidateProfileRow, CompanyProfileRow, JobRow


def make_candidate_row(**overrides: object) -> CandidateProfileRow:
    """Create an active candidate_profiles row."""
    defaults: dict[str, object] = {
        "id": str(uuid4()),
        "name": "Jane Doe",
        "headline": "Backend engineer",
        "email": "jane@example.com",
        "location": "Berlin, Germany",
        "status": "actively_looking",
        "skills_with_levels": [{"name": "Python", "years": 6}, {"name": "PostgreSQL", "years": 4}],
        "salary_min": 90_000,
        "salary_max": 110_000,
        "preferred_work_mode": ["Remote"],
        "interested_industries": ["Fintech"],
        "values_list": ["Ownership", "Transparency"],
        "character_traits": ["Curious", "Pragmatic"],
        "created_at": datetime(2026, 1, 1, tzinfo=UTC),
    }
    defaults.update(overrides)
    return CandidateProfileRow(**defaults)


def make_company_row(**overrides: object) -> CompanyProfileRow:
    """Create a remote-first Series A company_profiles row."""
    defaults: dict[str, object] = {
        "id": str(uuid4()),
        "company_name": "Acme Pay",
        "industry": ["Fintech"],
        "values": ["Ownership", "Transparency"],
        "desired_traits": ["Curious", "Pragmatic"],
        "funding_stage": "Series A",
        "remote_policy": "Remote-first",
        "headquarters_location": "Berlin, Germany",
        "company_size_range": "11-50",
        "credits": 3,
    }
    defaults.update(overrides)
    return CompanyProfileRow(**defaults)


def make_job_row(company_id: str, **overrides: object) -> JobRow:
    """Create a published jobs row."""
    defaults: dict[str, object] = {
        "id": str(uuid4()),
        "company_id": company_id,
        "title": "Backend Engineer",
        "status": "published",
        "required_skills_with_levels": [
            {"skill_name": "Python", "minimumYears": 3, "weight": "required"},
            {"skill_name": "PostgreSQL", "weight": "preferred"},
        ],
    }
    defaults.update(overrides)
    return JobRow(**defaults)
