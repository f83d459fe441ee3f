"""Candidate profile repository for database operations."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from talent_match_infra.db.models import CandidateProfileRow


class CandidateRepository:
    """Read and write operations for candidate profiles."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with an async session."""
        self._session = session

    async def get_by_id(self, candidate_id: str) -> CandidateProfileRow | None:
        """Retrieve a candidate by ID."""
        return await self._session.get(CandidateProfileRow, candidate_id)

    async def create(self, model: CandidateProfileRow) -> CandidateProfileRow:
        """Create a new candidate profile."""
        self._session.add(model)
        await self._session.flush()
        return model

    async def list_by_status(
        self,
        statuses: Sequence[str],
        limit: int = 100,
        offset: int = 0,
    ) -> list[CandidateProfileRow]:
        """List candidates in the given statuses, newest first."""
        stmt = (
            select(CandidateProfileRow)
            .where(CandidateProfileRow.status.in_(statuses))
            .order_by(CandidateProfileRow.created_at.desc(), CandidateProfileRow.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_status(self, statuses: Sequence[str]) -> int:
        """Count candidates in the given statuses."""
        stmt = (
            select(func.count())
            .select_from(CandidateProfileRow)
            .where(CandidateProfileRow.status.in_(statuses))
        )
        result = await self._session.execute(stmt)
        return int(result.scalar_one())
