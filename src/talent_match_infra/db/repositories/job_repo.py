"""Job posting repository for database operations."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from talent_match_infra.db.models import JobRow


class JobRepository:
    """Read and write operations for job postings."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with an async session."""
        self._session = session

    async def create(self, model: JobRow) -> JobRow:
        """Create a job posting."""
        self._session.add(model)
        await self._session.flush()
        return model

    async def list_by_company(self, company_id: str, status: str) -> list[JobRow]:
        """List a company's jobs in the given status, oldest first."""
        stmt = (
            select(JobRow)
            .where(JobRow.company_id == company_id, JobRow.status == status)
            .order_by(JobRow.created_at, JobRow.id)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())
