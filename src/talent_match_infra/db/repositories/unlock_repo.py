"""Unlock record and audit log repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from talent_match_infra.db.models import AuditLogRow, CandidateUnlockRow


class UnlockRepository:
    """Operations on candidate unlocks and their audit trail."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with an async session."""
        self._session = session

    async def get_by_pair(
        self, candidate_id: str, company_id: str
    ) -> CandidateUnlockRow | None:
        """Find the unlock for a candidate/company pair."""
        stmt = select(CandidateUnlockRow).where(
            CandidateUnlockRow.candidate_id == candidate_id,
            CandidateUnlockRow.company_id == company_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, model: CandidateUnlockRow) -> CandidateUnlockRow:
        """Insert an unlock record. Raises IntegrityError if the pair exists."""
        self._session.add(model)
        await self._session.flush()
        return model

    async def add_audit_log(self, model: AuditLogRow) -> AuditLogRow:
        """Insert an audit log entry."""
        self._session.add(model)
        await self._session.flush()
        return model

    async def list_audit_logs(self, candidate_id: str) -> list[AuditLogRow]:
        """List audit entries for a candidate, oldest first."""
        stmt = (
            select(AuditLogRow)
            .where(AuditLogRow.candidate_id == candidate_id)
            .order_by(AuditLogRow.created_at)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())
