"""Custom exception hierarchy for talent-match."""

from __future__ import annotations

from talent_match_core.models.enums import UnlockErrorCode


class TalentMatchError(Exception):
    """Base exception for all talent-match errors."""


class StoreUnavailableError(TalentMatchError):
    """Raised when the profile/job store cannot be reached or queried."""


class DuplicateUnlockError(TalentMatchError):
    """Raised when an unlock record already exists for a candidate/company pair."""


class UnlockError(TalentMatchError):
    """Raised when a profile unlock is refused, with a stable error code."""

    def __init__(self, code: UnlockErrorCode, message: str) -> None:
        """Initialize with an error code and a user-facing message."""
        super().__init__(message)
        self.code = code
        self.message = message
