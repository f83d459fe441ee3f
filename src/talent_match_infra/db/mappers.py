"""Row -> domain mappers for the snake_case profile and job tables.

Each mapper is a pure, total function: every nullable column resolves to a
documented default instead of failing.

    skills_with_levels / skills        first non-empty list, else []
    list columns                        []
    salary_currency                     "USD"
    salary_min / salary_max             None (also for negative values)
    willing_to_relocate                 False
    orgSizePreference (JSON)            unspecified
    remote_policy / headquarters / name ""
    team_size / credits / cost_credits  0 (also for negative values)
    funding_stage                       Unknown
    candidate status                    not_looking
    job status                          draft
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from talent_match_core.models.candidate import CandidateProfile, Skill
from talent_match_core.models.company import CompanyProfile
from talent_match_core.models.enums import (
    CandidateStatus,
    FundingStage,
    JobStatus,
    OrgSizePreference,
    WorkMode,
)
from talent_match_core.models.job import JobPosting, JobSkill
from talent_match_core.models.unlock import UnlockRecord
from talent_match_infra.db.models import (
    CandidateProfileRow,
    CandidateUnlockRow,
    CompanyProfileRow,
    JobRow,
)

_NAME_KEYS = ("name", "skill", "skill_name")


def _skill_name(entry: Mapping[str, Any]) -> str:
    for key in _NAME_KEYS:
        value = entry.get(key)
        if isinstance(value, str) and value:
            return value
    return ""


def _number(value: object, default: float = 0.0) -> float:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return max(float(value), 0.0)
    return default


def _level(value: object) -> int | None:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return max(1, min(5, int(value)))
    return None


def _salary(value: int | None) -> int | None:
    return value if value is not None and value >= 0 else None


def _strings(values: list[Any] | None) -> list[str]:
    return [v for v in values or [] if isinstance(v, str)]


def skill_from_entry(entry: object) -> Skill | None:
    """Map one stored candidate skill (string or object) to a Skill."""
    if isinstance(entry, str):
        return Skill(name=entry, years=0, level=3) if entry else None
    if not isinstance(entry, Mapping):
        return None
    name = _skill_name(entry)
    if not name:
        return None
    years = entry.get("years")
    if years is None:
        years = entry.get("minimumYears", entry.get("minimum_years"))
    return Skill(name=name, years=_number(years), level=_level(entry.get("level")))


def job_skill_from_entry(entry: object) -> JobSkill | None:
    """Map one stored job skill requirement (string or object) to a JobSkill."""
    if isinstance(entry, str):
        return JobSkill(name=entry, required_level=3) if entry else None
    if not isinstance(entry, Mapping):
        return None
    name = _skill_name(entry)
    if not name:
        return None
    weight = entry.get("weight")
    minimum_years = entry.get("minimumYears", entry.get("minimum_years"))
    return JobSkill(
        name=name,
        required_level=_level(entry.get("required_level", entry.get("requiredLevel"))),
        minimum_years=_number(minimum_years),
        weight="required" if weight == "required" else "preferred",
    )


def _org_size_preference(prefs: Mapping[str, Any] | None) -> OrgSizePreference:
    if not prefs:
        return OrgSizePreference.UNSPECIFIED
    value = prefs.get("orgSizePreference", prefs.get("org_size_preference"))
    return OrgSizePreference(value) if isinstance(value, str) else OrgSizePreference.UNSPECIFIED


def candidate_from_row(row: CandidateProfileRow) -> CandidateProfile:
    """Map a candidate_profiles row to a CandidateProfile."""
    source = row.skills_with_levels or row.skills or []
    skills = [skill for skill in map(skill_from_entry, source) if skill is not None]
    return CandidateProfile(
        id=row.id,
        name=row.name or "",
        headline=row.headline or "",
        email=row.email,
        location=row.location,
        status=CandidateStatus(row.status or CandidateStatus.NOT_LOOKING),
        skills=skills,
        salary_min=_salary(row.salary_min),
        salary_max=_salary(row.salary_max),
        salary_currency=row.salary_currency or "USD",
        preferred_work_modes=[WorkMode(mode) for mode in _strings(row.preferred_work_mode)],
        willing_to_relocate=bool(row.willing_to_relocate),
        interested_industries=_strings(row.interested_industries),
        values=_strings(row.values_list),
        character_traits=_strings(row.character_traits),
        preferred_company_sizes=_strings(row.preferred_company_size),
        org_size_preference=_org_size_preference(row.team_collaboration_preferences),
        created_at=row.created_at,
    )


def company_from_row(row: CompanyProfileRow) -> CompanyProfile:
    """Map a company_profiles row to a CompanyProfile."""
    return CompanyProfile(
        id=row.id,
        company_name=row.company_name or "",
        industries=_strings(row.industry),
        values=_strings(row.values),
        desired_traits=_strings(row.desired_traits),
        funding_stage=FundingStage(row.funding_stage or FundingStage.UNKNOWN),
        remote_policy=row.remote_policy or "",
        headquarters_location=row.headquarters_location or "",
        company_size_range=row.company_size_range or None,
        team_size=max(row.team_size or 0, 0),
        credits=max(row.credits or 0, 0),
    )


def job_from_row(row: JobRow) -> JobPosting:
    """Map a jobs row to a JobPosting."""
    source = row.required_skills_with_levels or row.required_skills or []
    skills = [skill for skill in map(job_skill_from_entry, source) if skill is not None]
    return JobPosting(
        id=row.id,
        company_id=row.company_id,
        title=row.title or "",
        status=JobStatus(row.status or JobStatus.DRAFT),
        required_skills=skills,
    )


def unlock_from_row(row: CandidateUnlockRow) -> UnlockRecord:
    """Map a candidate_unlocks row to an UnlockRecord."""
    return UnlockRecord(
        id=row.id,
        candidate_id=row.candidate_id,
        company_id=row.company_id,
        unlocked_by=row.unlocked_by,
        unlocked_at=row.created_at or datetime.now(UTC),
        cost=max(row.cost_credits or 0, 0),
    )
