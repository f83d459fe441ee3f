"""Shared constants and lookup tables for talent-match."""

from __future__ import annotations

from talent_match_core.models.enums import FundingStage, OrgSizePreference

# Candidate statuses that make up the matchable pool
ACTIVE_CANDIDATE_STATUSES: tuple[str, ...] = (
    "actively_looking",
    "open_to_offers",
    "happy_but_listening",
)

# Thresholds and neutral defaults
DEFAULT_MIN_MATCH_SCORE = 65
CULTURE_SCORE_FLOOR = 30
NEUTRAL_SKILLS_SCORE = 50
MAX_AGGREGATED_SKILLS = 20

# Culture blend between values and traits similarity
CULTURE_VALUES_WEIGHT = 0.6
CULTURE_TRAITS_WEIGHT = 0.4

# Skill weight tags
REQUIRED_SKILL_WEIGHT = 2
PREFERRED_SKILL_WEIGHT = 1

# Candidate max salary when only a minimum is given
SALARY_MAX_MULTIPLIER = 1.3

# Estimated annual salary band (USD) by funding stage
FUNDING_STAGE_SALARY_RANGES: dict[FundingStage, tuple[int, int]] = {
    FundingStage.PRE_SEED: (50_000, 100_000),
    FundingStage.SEED: (60_000, 120_000),
    FundingStage.SERIES_A: (80_000, 150_000),
    FundingStage.SERIES_B: (100_000, 180_000),
    FundingStage.SERIES_C: (120_000, 220_000),
    FundingStage.SERIES_D_PLUS: (130_000, 250_000),
    FundingStage.PUBLIC: (130_000, 280_000),
    FundingStage.BOOTSTRAPPED: (60_000, 130_000),
}
DEFAULT_FUNDING_STAGE = FundingStage.SEED

# Company size bucket -> compatible candidate org-size preferences
COMPANY_SIZE_TO_ORG_PREF: dict[str, tuple[OrgSizePreference, ...]] = {
    "1-10": (OrgSizePreference.TINY, OrgSizePreference.SMALL),
    "11-50": (OrgSizePreference.SMALL, OrgSizePreference.TINY),
    "51-200": (OrgSizePreference.MEDIUM, OrgSizePreference.SMALL),
    "201-500": (OrgSizePreference.MEDIUM, OrgSizePreference.LARGE),
    "501-1000": (OrgSizePreference.LARGE, OrgSizePreference.MEDIUM),
    "1000+": (OrgSizePreference.ENTERPRISE, OrgSizePreference.LARGE),
}
DEFAULT_COMPANY_SIZE_BUCKET = "11-50"
DEFAULT_ORG_PREFS: tuple[OrgSizePreference, ...] = (OrgSizePreference.SMALL,)

# Upper bound (inclusive) of each size bucket, used to bucket a raw team size
COMPANY_SIZE_BUCKET_BOUNDS: list[tuple[int, str]] = [
    (10, "1-10"),
    (50, "11-50"),
    (200, "51-200"),
    (500, "201-500"),
    (1000, "501-1000"),
]
LARGEST_COMPANY_SIZE_BUCKET = "1000+"

# Unlock flow
UNLOCK_COST_CREDITS = 1
RECRUITER_ROLE = "recruiter"

# Loggers held at WARNING or above regardless of the root level
QUIET_LOGGERS: tuple[str, ...] = ("sqlalchemy.engine", "aiosqlite", "asyncpg")
