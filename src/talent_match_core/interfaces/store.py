"""Abstract data store interfaces consumed by the matching engine."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from talent_match_core.models.candidate import CandidateProfile
from talent_match_core.models.company import CompanyProfile
from talent_match_core.models.job import JobPosting
from talent_match_core.models.unlock import AuditEvent, UnlockRecord


@runtime_checkable
class TalentStore(Protocol):
    """Read-only access to profiles and job postings."""

    async def get_company(self, company_id: str) -> CompanyProfile | None:
        """Retrieve a company profile by ID, or None if not found."""
        ...

    async def get_candidate(self, candidate_id: str) -> CandidateProfile | None:
        """Retrieve a candidate profile by ID, or None if not found."""
        ...

    async def list_published_jobs(self, company_id: str) -> list[JobPosting]:
        """List a company's published job postings."""
        ...

    async def list_active_candidates(self, limit: int) -> list[CandidateProfile]:
        """List the most recent candidates who are open to opportunities."""
        ...

    async def list_recent_candidates(
        self, offset: int, limit: int
    ) -> tuple[list[CandidateProfile], int]:
        """Return one newest-first page of active candidates and the total count."""
        ...


@runtime_checkable
class CreditLedger(Protocol):
    """Credit balance and unlock bookkeeping."""

    async def find_unlock(self, candidate_id: str, company_id: str) -> UnlockRecord | None:
        """Return the existing unlock for this pair, if any."""
        ...

    async def get_credits(self, company_id: str) -> int | None:
        """Return the company's credit balance, or None if the company is unknown."""
        ...

    async def deduct_credits(self, company_id: str, cost: int) -> int | None:
        """Atomically deduct credits only if the balance covers the cost.

        Returns the new balance, or None when the balance was insufficient
        at the moment of the write.
        """
        ...

    async def refund_credits(self, company_id: str, cost: int) -> int:
        """Give credits back after a failed unlock and return the new balance."""
        ...

    async def record_unlock(
        self, candidate_id: str, company_id: str, unlocked_by: str, cost: int
    ) -> UnlockRecord:
        """Insert an unlock record. Raises DuplicateUnlockError on conflict."""
        ...

    async def log_audit_event(self, event: AuditEvent) -> None:
        """Persist an audit trail entry."""
        ...
