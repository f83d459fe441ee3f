"""Domain models for talent-match."""

from talent_match_core.models.candidate import CandidateProfile, Skill
from talent_match_core.models.company import CompanyProfile
from talent_match_core.models.enums import (
    CandidateStatus,
    Dimension,
    FundingStage,
    JobStatus,
    OrgSizePreference,
    UnlockErrorCode,
    WorkMode,
)
from talent_match_core.models.job import AggregatedSkill, JobPosting, JobSkill
from talent_match_core.models.match import (
    CandidateMatch,
    DimensionScore,
    MatchBreakdown,
    MatchWeights,
    RecentCandidatesPage,
)
from talent_match_core.models.unlock import (
    AuditEvent,
    RequesterContext,
    UnlockRecord,
    UnlockResult,
)

__all__ = [
    "AggregatedSkill",
    "AuditEvent",
    "CandidateMatch",
    "CandidateProfile",
    "CandidateStatus",
    "CompanyProfile",
    "Dimension",
    "DimensionScore",
    "FundingStage",
    "JobPosting",
    "JobSkill",
    "JobStatus",
    "MatchBreakdown",
    "MatchWeights",
    "OrgSizePreference",
    "RecentCandidatesPage",
    "RequesterContext",
    "Skill",
    "UnlockErrorCode",
    "UnlockRecord",
    "UnlockResult",
    "WorkMode",
]
