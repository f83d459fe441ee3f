"""Credit-gated profile unlock transaction."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import structlog

from talent_match_core.constants import RECRUITER_ROLE
from talent_match_core.exceptions import (
    DuplicateUnlockError,
    StoreUnavailableError,
    UnlockError,
)
from talent_match_core.models.enums import UnlockErrorCode
from talent_match_core.models.unlock import (
    AuditEvent,
    RequesterContext,
    UnlockRecord,
    UnlockResult,
)

if TYPE_CHECKING:
    from talent_match_core.config.settings import Settings
    from talent_match_core.interfaces.store import CreditLedger, TalentStore

logger = structlog.get_logger()

_UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)

ATTEMPT_ACTION = "unlock_profile_attempt"
SUCCESS_ACTION = "unlock_profile_success"


class UnlockService:
    """Unlock a candidate profile for a recruiter's company, charging credits once.

    Re-unlocking an already unlocked candidate succeeds at no cost. Credits
    are only deducted through the ledger's conditional decrement, and are
    refunded if the unlock record cannot be written.
    """

    def __init__(self, store: TalentStore, ledger: CreditLedger, settings: Settings) -> None:
        """Initialize with a profile store, a credit ledger and settings."""
        self.store = store
        self.ledger = ledger
        self.cost = settings.unlock_cost_credits

    async def unlock(self, candidate_id: str, requester: RequesterContext) -> UnlockResult:
        """Unlock ``candidate_id`` for the requester's company.

        Raises:
            UnlockError: With code INVALID_REQUEST, UNAUTHORIZED, NOT_FOUND
                or INSUFFICIENT_CREDITS. Store outages surface as INVALID_REQUEST.
        """
        if not candidate_id or not _UUID_RE.match(candidate_id):
            raise UnlockError(UnlockErrorCode.INVALID_REQUEST, "candidateId must be a valid UUID.")

        company_id = await self._authorize(candidate_id, requester)
        try:
            return await self._unlock_for_company(candidate_id, company_id, requester)
        except StoreUnavailableError as e:
            logger.error(
                "unlock_store_unavailable",
                candidate_id=candidate_id,
                company_id=company_id,
                error=str(e),
            )
            await self._audit_failure(
                requester, company_id, candidate_id, "Store unavailable", db_error=str(e)
            )
            raise UnlockError(
                UnlockErrorCode.INVALID_REQUEST,
                "Failed to process unlock request. Please try again.",
            ) from e

    async def _unlock_for_company(
        self, candidate_id: str, company_id: str, requester: RequesterContext
    ) -> UnlockResult:
        credits = await self.ledger.get_credits(company_id)
        if credits is None:
            await self._audit_failure(requester, company_id, candidate_id, "Company not found")
            raise UnlockError(
                UnlockErrorCode.UNAUTHORIZED, "Failed to retrieve company information."
            )

        existing = await self.ledger.find_unlock(candidate_id, company_id)
        if existing is not None:
            return await self._already_unlocked(existing, credits)

        if credits < self.cost:
            await self._audit_failure(
                requester, company_id, candidate_id, "Insufficient credits", credits=credits
            )
            raise UnlockError(
                UnlockErrorCode.INSUFFICIENT_CREDITS,
                f"Insufficient credits. You have {credits} credits, but {self.cost} is required.",
            )

        candidate = await self.store.get_candidate(candidate_id)
        if candidate is None:
            await self._audit_failure(requester, company_id, candidate_id, "Candidate not found")
            raise UnlockError(UnlockErrorCode.NOT_FOUND, "Candidate profile not found.")

        remaining = await self.ledger.deduct_credits(company_id, self.cost)
        if remaining is None:
            await self._audit_failure(
                requester,
                company_id,
                candidate_id,
                "Credit deduction failed - possible race condition",
            )
            raise UnlockError(
                UnlockErrorCode.INSUFFICIENT_CREDITS, "Failed to deduct credits. Please try again."
            )

        try:
            record = await self.ledger.record_unlock(
                candidate_id, company_id, requester.user_id, self.cost
            )
        except DuplicateUnlockError:
            remaining = await self.ledger.refund_credits(company_id, self.cost)
            winner = await self.ledger.find_unlock(candidate_id, company_id)
            if winner is None:
                raise UnlockError(
                    UnlockErrorCode.INVALID_REQUEST,
                    "Failed to create unlock record. Credits have been refunded.",
                ) from None
            logger.info("unlock_lost_race", candidate_id=candidate_id, company_id=company_id)
            return await self._already_unlocked(winner, remaining)
        except Exception as e:
            refunded = await self._refund(company_id)
            await self._audit_failure(
                requester,
                company_id,
                candidate_id,
                "Failed to insert unlock record",
                db_error=str(e),
                refunded=refunded is not None,
            )
            message = (
                "Failed to create unlock record. Credits have been refunded."
                if refunded is not None
                else "Failed to create unlock record and to refund credits."
            )
            raise UnlockError(UnlockErrorCode.INVALID_REQUEST, message) from e

        await self._audit(
            AuditEvent(
                action=SUCCESS_ACTION,
                user_id=requester.user_id,
                company_id=company_id,
                candidate_id=candidate_id,
                metadata={
                    "unlock_id": record.id,
                    "credits_cost": self.cost,
                    "credits_remaining": remaining,
                },
                success=True,
            )
        )
        logger.info(
            "unlock_success",
            candidate_id=candidate_id,
            company_id=company_id,
            credits_remaining=remaining,
        )
        return UnlockResult(candidate=candidate, credits_remaining=remaining, unlock=record)

    async def _authorize(self, candidate_id: str, requester: RequesterContext) -> str:
        """Check the requester is a recruiter with a company; return the company id."""
        if requester.role != RECRUITER_ROLE:
            await self._audit_failure(
                requester,
                requester.company_id,
                candidate_id,
                "Not a recruiter",
                role=requester.role,
            )
            raise UnlockError(
                UnlockErrorCode.UNAUTHORIZED, "Only recruiters can unlock candidate profiles."
            )
        if not requester.company_id:
            await self._audit_failure(requester, None, candidate_id, "No company association")
            raise UnlockError(
                UnlockErrorCode.UNAUTHORIZED, "User is not associated with a company."
            )
        return requester.company_id

    async def _refund(self, company_id: str) -> int | None:
        """Give the unlock cost back; None if the ledger could not be reached."""
        try:
            return await self.ledger.refund_credits(company_id, self.cost)
        except StoreUnavailableError as e:
            logger.error(
                "unlock_refund_failed", company_id=company_id, cost=self.cost, error=str(e)
            )
            return None

    async def _already_unlocked(self, record: UnlockRecord, credits: int) -> UnlockResult:
        """Return an existing unlock without charging."""
        candidate = await self.store.get_candidate(record.candidate_id)
        if candidate is None:
            raise UnlockError(UnlockErrorCode.NOT_FOUND, "Candidate profile not found.")
        logger.info(
            "unlock_already_unlocked",
            candidate_id=record.candidate_id,
            company_id=record.company_id,
        )
        return UnlockResult(
            candidate=candidate,
            credits_remaining=credits,
            unlock=record,
            already_unlocked=True,
        )

    async def _audit_failure(
        self,
        requester: RequesterContext,
        company_id: str | None,
        candidate_id: str,
        error: str,
        **metadata: object,
    ) -> None:
        await self._audit(
            AuditEvent(
                action=ATTEMPT_ACTION,
                user_id=requester.user_id,
                company_id=company_id,
                candidate_id=candidate_id,
                metadata={"error": error, **metadata},
                success=False,
            )
        )

    async def _audit(self, event: AuditEvent) -> None:
        """Write an audit event; failures are logged and never fail the unlock."""
        try:
            await self.ledger.log_audit_event(event)
        except Exception as e:
            logger.warning(
                "audit_log_failed",
                action=event.action,
                error_type=type(e).__name__,
                error=str(e),
            )
