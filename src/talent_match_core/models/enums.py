"""Closed enumerations shared by the domain models."""

from __future__ import annotations

import re
from enum import StrEnum


def _normalize(value: str) -> str:
    """Collapse case, spaces, dashes and underscores for lenient lookups."""
    return re.sub(r"[\s_\-]+", "", value).lower()


class WorkMode(StrEnum):
    """Preferred working arrangement."""

    REMOTE = "Remote"
    HYBRID = "Hybrid"
    ON_SITE = "OnSite"
    UNSPECIFIED = "Unspecified"

    @classmethod
    def _missing_(cls, value: object) -> WorkMode:
        if isinstance(value, str):
            key = _normalize(value)
            if key in ("onsite", "office", "inoffice"):
                return cls.ON_SITE
            for member in cls:
                if _normalize(member.value) == key:
                    return member
        return cls.UNSPECIFIED


class FundingStage(StrEnum):
    """Company funding stage."""

    PRE_SEED = "Pre-seed"
    SEED = "Seed"
    SERIES_A = "Series A"
    SERIES_B = "Series B"
    SERIES_C = "Series C"
    SERIES_D_PLUS = "Series D+"
    PUBLIC = "Public"
    BOOTSTRAPPED = "Bootstrapped"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value: object) -> FundingStage:
        if isinstance(value, str):
            key = _normalize(value)
            for member in cls:
                if _normalize(member.value) == key:
                    return member
        return cls.UNKNOWN


class OrgSizePreference(StrEnum):
    """Candidate's preferred organization size."""

    TINY = "tiny_under_10"
    SMALL = "small_10_50"
    MEDIUM = "medium_50_200"
    LARGE = "large_200_1000"
    ENTERPRISE = "enterprise_1000_plus"
    UNSPECIFIED = "unspecified"

    @classmethod
    def _missing_(cls, value: object) -> OrgSizePreference:
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return cls.UNSPECIFIED


class CandidateStatus(StrEnum):
    """Candidate job-search status."""

    ACTIVELY_LOOKING = "actively_looking"
    OPEN_TO_OFFERS = "open_to_offers"
    HAPPY_BUT_LISTENING = "happy_but_listening"
    NOT_LOOKING = "not_looking"

    @classmethod
    def _missing_(cls, value: object) -> CandidateStatus:
        return cls.NOT_LOOKING


class JobStatus(StrEnum):
    """Lifecycle status of a job posting."""

    DRAFT = "draft"
    PENDING_APPROVAL = "pending_approval"
    PUBLISHED = "published"
    CLOSED = "closed"

    @classmethod
    def _missing_(cls, value: object) -> JobStatus:
        return cls.DRAFT


class Dimension(StrEnum):
    """Independently scored axis of candidate/target fit."""

    SKILLS = "skills"
    INDUSTRY = "industry"
    CULTURE = "culture"
    COMPENSATION = "compensation"
    LOCATION = "location"
    STAGE_FIT = "stage_fit"


class UnlockErrorCode(StrEnum):
    """Stable error codes returned by the unlock transaction."""

    INSUFFICIENT_CREDITS = "INSUFFICIENT_CREDITS"
    ALREADY_UNLOCKED = "ALREADY_UNLOCKED"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_REQUEST = "INVALID_REQUEST"
