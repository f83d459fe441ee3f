"""Dimension scorers: one pure function per axis of candidate/company fit.

Every scorer returns a ``DimensionScore`` with an integer score in [0, 100]
and a short reason. Missing optional data never raises; it resolves to the
neutral or most permissive score for that dimension.
"""

from __future__ import annotations

from collections.abc import Sequence

from talent_match_core.constants import (
    COMPANY_SIZE_BUCKET_BOUNDS,
    COMPANY_SIZE_TO_ORG_PREF,
    CULTURE_SCORE_FLOOR,
    CULTURE_TRAITS_WEIGHT,
    CULTURE_VALUES_WEIGHT,
    DEFAULT_COMPANY_SIZE_BUCKET,
    DEFAULT_FUNDING_STAGE,
    DEFAULT_ORG_PREFS,
    FUNDING_STAGE_SALARY_RANGES,
    LARGEST_COMPANY_SIZE_BUCKET,
    NEUTRAL_SKILLS_SCORE,
    PREFERRED_SKILL_WEIGHT,
    REQUIRED_SKILL_WEIGHT,
    SALARY_MAX_MULTIPLIER,
)
from talent_match_core.models.candidate import CandidateProfile
from talent_match_core.models.company import CompanyProfile
from talent_match_core.models.enums import FundingStage, OrgSizePreference
from talent_match_core.models.job import JobSkill
from talent_match_core.models.match import DimensionScore
from talent_match_engine.scoring.similarity import (
    jaccard_similarity,
    overlap_fraction,
    ranges_overlap,
    to_score,
)


def _result(score: float, reason: str) -> DimensionScore:
    return DimensionScore(score=to_score(score), reason=reason)


def score_skills(
    candidate: CandidateProfile,
    requirements: Sequence[JobSkill],
    neutral_score: int = NEUTRAL_SKILLS_SCORE,
) -> DimensionScore:
    """Weighted share of required skills the candidate holds (exact name match)."""
    if not requirements:
        return _result(neutral_score, "No job requirements to match against")

    held = {skill.name.lower() for skill in candidate.skills}
    matched_weight = 0
    total_weight = 0
    matched = 0
    for requirement in requirements:
        weight = (
            REQUIRED_SKILL_WEIGHT if requirement.weight == "required" else PREFERRED_SKILL_WEIGHT
        )
        total_weight += weight
        if requirement.key in held:
            matched_weight += weight
            matched += 1

    score = matched_weight / total_weight * 100
    reason = f"{matched}/{len(requirements)} skills match" if matched else "Few skill overlaps"
    return _result(score, reason)


def score_industry(candidate: CandidateProfile, company: CompanyProfile) -> DimensionScore:
    """Discrete industry fit: 100, 70 or 40."""
    if not company.industries:
        return _result(100, "No industry restrictions")

    company_industries = {industry.lower() for industry in company.industries}
    overlap = [
        industry
        for industry in candidate.interested_industries
        if industry.lower() in company_industries
    ]
    if overlap:
        return _result(100, f"Interested in {overlap[0]}")
    if not candidate.interested_industries:
        return _result(70, "Open to industries")
    return _result(40, "Different industry interests")


def score_culture(
    candidate: CandidateProfile,
    company: CompanyProfile,
    floor: int = CULTURE_SCORE_FLOOR,
) -> DimensionScore:
    """Blend of values and traits Jaccard similarity, floored."""
    values_similarity = jaccard_similarity(candidate.values, company.values)
    traits_similarity = jaccard_similarity(candidate.character_traits, company.desired_traits)
    raw = to_score(
        (values_similarity * CULTURE_VALUES_WEIGHT + traits_similarity * CULTURE_TRAITS_WEIGHT)
        * 100
    )

    company_values = {value.lower() for value in company.values}
    shared = [value for value in candidate.values if value.lower() in company_values]
    if shared:
        reason = f"Values: {', '.join(shared[:2])}"
    elif raw > 50:
        reason = "Compatible culture"
    else:
        reason = "Different values focus"
    return _result(max(raw, floor), reason)


def salary_range_for(stage: FundingStage) -> tuple[int, int]:
    """Estimated salary band for a funding stage, defaulting to the Seed band."""
    return FUNDING_STAGE_SALARY_RANGES.get(
        stage, FUNDING_STAGE_SALARY_RANGES[DEFAULT_FUNDING_STAGE]
    )


def score_compensation(candidate: CandidateProfile, company: CompanyProfile) -> DimensionScore:
    """Compare the candidate's salary expectation with the company's stage band."""
    target_min, target_max = salary_range_for(company.funding_stage)
    candidate_min = candidate.salary_min or 0
    candidate_max = candidate.salary_max or candidate_min * SALARY_MAX_MULTIPLIER

    if ranges_overlap(candidate_min, candidate_max, target_min, target_max):
        fraction = overlap_fraction(candidate_min, candidate_max, target_min, target_max)
        return _result(70 + fraction * 30, "Salary expectations align")

    if candidate_min > target_max:
        percent_over = (candidate_min - target_max) / target_max * 100
        return _result(max(20, 60 - percent_over), "Expects higher compensation")

    return _result(80, "Within budget range")


def score_location(candidate: CandidateProfile, company: CompanyProfile) -> DimensionScore:
    """Work-mode compatibility first, then same-city and relocation fallbacks."""
    remote_first = company.is_remote_first

    if remote_first and candidate.wants_remote:
        return _result(100, "Remote-friendly match")
    if company.is_hybrid and (candidate.wants_hybrid or candidate.wants_remote):
        return _result(90, "Hybrid arrangement works")

    if company.headquarters_location and candidate.location:
        city = company.headquarters_location.split(",")[0].strip().lower()
        if city and city in candidate.location.lower():
            if candidate.wants_on_site:
                return _result(100, "Same location")
            return _result(85, "Near office location")

    if candidate.willing_to_relocate:
        return _result(70, "Open to relocation")
    if candidate.wants_remote and not remote_first:
        return _result(50, "Remote preference, on-site role")
    return _result(60, "Location may need discussion")


def company_size_bucket(company: CompanyProfile) -> str:
    """Size bucket from the declared range, else from team size, else the default."""
    if company.company_size_range:
        return company.company_size_range
    if company.team_size > 0:
        for upper_bound, bucket in COMPANY_SIZE_BUCKET_BOUNDS:
            if company.team_size <= upper_bound:
                return bucket
        return LARGEST_COMPANY_SIZE_BUCKET
    return DEFAULT_COMPANY_SIZE_BUCKET


def score_stage_fit(candidate: CandidateProfile, company: CompanyProfile) -> DimensionScore:
    """Fit between the company's size and the candidate's org-size preference."""
    bucket = company_size_bucket(company)
    compatible = COMPANY_SIZE_TO_ORG_PREF.get(bucket, DEFAULT_ORG_PREFS)
    org_pref = candidate.org_size_preference
    has_org_pref = org_pref is not OrgSizePreference.UNSPECIFIED

    if has_org_pref and org_pref in compatible:
        return _result(100, "Ideal company size")

    size_prefs = [pref.lower() for pref in candidate.preferred_company_sizes if pref.strip()]
    bucket_lower = bucket.lower()
    bucket_floor = bucket_lower.split("-")[0]
    if any(pref in bucket_lower or bucket_floor in pref for pref in size_prefs):
        return _result(95, "Preferred company size")

    if not has_org_pref and not size_prefs:
        return _result(75, "Flexible on company size")
    return _result(50, "Different size preference")
