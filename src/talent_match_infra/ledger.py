"""SQLAlchemy-backed CreditLedger.

Each operation runs in its own short transaction. The credit decrement is a
single conditional UPDATE, so two concurrent unlocks can never take the
balance below zero; the unique (candidate_id, company_id) constraint decides
which of two concurrent unlocks of the same pair wins.
"""

from __future__ import annotations

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from talent_match_core.exceptions import DuplicateUnlockError, StoreUnavailableError
from talent_match_core.models.unlock import AuditEvent, UnlockRecord
from talent_match_infra.db.mappers import unlock_from_row
from talent_match_infra.db.models import AuditLogRow, CandidateUnlockRow
from talent_match_infra.db.repositories.company_repo import CompanyRepository
from talent_match_infra.db.repositories.unlock_repo import UnlockRepository

logger = structlog.get_logger()


class SqlCreditLedger:
    """Credit balances, unlock records and the audit trail in SQL."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize with a session factory."""
        self._session_factory = session_factory

    async def find_unlock(self, candidate_id: str, company_id: str) -> UnlockRecord | None:
        """Return the existing unlock for this pair, if any."""
        try:
            async with self._session_factory() as session:
                row = await UnlockRepository(session).get_by_pair(candidate_id, company_id)
                return unlock_from_row(row) if row is not None else None
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to look up unlock: {e}") from e

    async def get_credits(self, company_id: str) -> int | None:
        """Return the company's credit balance, or None if unknown."""
        try:
            async with self._session_factory() as session:
                return await CompanyRepository(session).get_credits(company_id)
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to read credits: {e}") from e

    async def deduct_credits(self, company_id: str, cost: int) -> int | None:
        """Deduct ``cost`` if the balance covers it; return the new balance or None."""
        try:
            async with self._session_factory() as session, session.begin():
                repo = CompanyRepository(session)
                if not await repo.deduct_credits(company_id, cost):
                    return None
                return await repo.get_credits(company_id)
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to deduct credits: {e}") from e

    async def refund_credits(self, company_id: str, cost: int) -> int:
        """Give ``cost`` credits back and return the new balance."""
        try:
            async with self._session_factory() as session, session.begin():
                repo = CompanyRepository(session)
                await repo.add_credits(company_id, cost)
                balance = await repo.get_credits(company_id)
        except SQLAlchemyError as e:
            logger.error("credit_refund_failed", company_id=company_id, cost=cost, error=str(e))
            raise StoreUnavailableError(f"Failed to refund credits: {e}") from e
        logger.info("credits_refunded", company_id=company_id, cost=cost, balance=balance)
        return balance or 0

    async def record_unlock(
        self, candidate_id: str, company_id: str, unlocked_by: str, cost: int
    ) -> UnlockRecord:
        """Insert an unlock record; DuplicateUnlockError if the pair exists."""
        try:
            async with self._session_factory() as session, session.begin():
                row = await UnlockRepository(session).create(
                    CandidateUnlockRow(
                        candidate_id=candidate_id,
                        company_id=company_id,
                        unlocked_by=unlocked_by,
                        cost_credits=cost,
                    )
                )
                return unlock_from_row(row)
        except IntegrityError as e:
            msg = f"Candidate {candidate_id} already unlocked by company {company_id}"
            raise DuplicateUnlockError(msg) from e
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to record unlock: {e}") from e

    async def log_audit_event(self, event: AuditEvent) -> None:
        """Persist an audit trail entry."""
        try:
            async with self._session_factory() as session, session.begin():
                await UnlockRepository(session).add_audit_log(
                    AuditLogRow(
                        action=event.action,
                        user_id=event.user_id,
                        company_id=event.company_id,
                        candidate_id=event.candidate_id,
                        metadata_json=dict(event.metadata),
                        success=event.success,
                        created_at=event.created_at,
                    )
                )
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to write audit log: {e}") from e
