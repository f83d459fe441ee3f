"""Profile unlock models."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from talent_match_core.models.candidate import CandidateProfile


class RequesterContext(BaseModel):
    """An already-authenticated user asking to unlock a profile."""

    user_id: str = Field(description="Authenticated user identifier")
    role: str | None = Field(default=None, description="User role (e.g. 'recruiter')")
    company_id: str | None = Field(default=None, description="Company the user acts for")


class UnlockRecord(BaseModel):
    """A company's paid access to a candidate profile."""

    id: str = Field(description="Unlock record identifier")
    candidate_id: str = Field(description="Unlocked candidate")
    company_id: str = Field(description="Company that paid for the unlock")
    unlocked_by: str | None = Field(default=None, description="User who performed the unlock")
    unlocked_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="When the unlock happened"
    )
    cost: int = Field(default=0, ge=0, description="Credits charged")


class UnlockResult(BaseModel):
    """Successful outcome of an unlock request."""

    candidate: CandidateProfile = Field(description="The unlocked candidate profile")
    credits_remaining: int = Field(ge=0, description="Company credit balance after the unlock")
    unlock: UnlockRecord = Field(description="The unlock record")
    already_unlocked: bool = Field(
        default=False, description="True when no credits were charged by this request"
    )


class AuditEvent(BaseModel):
    """Audit trail entry for an unlock attempt."""

    action: str = Field(description="Audit action name")
    user_id: str = Field(description="Acting user")
    company_id: str | None = Field(default=None, description="Acting company")
    candidate_id: str = Field(description="Target candidate")
    metadata: dict[str, object] = Field(default_factory=dict, description="Extra context")
    success: bool = Field(description="Whether the attempt succeeded")
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
