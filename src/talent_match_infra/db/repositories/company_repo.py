"""Company profile repository, including the credit balance."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from talent_match_infra.db.models import CompanyProfileRow


class CompanyRepository:
    """Read and credit operations for company profiles."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with an async session."""
        self._session = session

    async def get_by_id(self, company_id: str) -> CompanyProfileRow | None:
        """Retrieve a company by ID."""
        return await self._session.get(CompanyProfileRow, company_id)

    async def create(self, model: CompanyProfileRow) -> CompanyProfileRow:
        """Create a new company profile."""
        self._session.add(model)
        await self._session.flush()
        return model

    async def get_credits(self, company_id: str) -> int | None:
        """Return the current credit balance, or None for an unknown company."""
        stmt = select(CompanyProfileRow.credits).where(CompanyProfileRow.id == company_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def deduct_credits(self, company_id: str, cost: int) -> bool:
        """Decrement credits in one statement, only if the balance covers ``cost``.

        Returns True when a row was updated.
        """
        stmt = (
            update(CompanyProfileRow)
            .where(CompanyProfileRow.id == company_id, CompanyProfileRow.credits >= cost)
            .values(credits=CompanyProfileRow.credits - cost)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount == 1

    async def add_credits(self, company_id: str, amount: int) -> bool:
        """Increment credits. Returns True when a row was updated."""
        stmt = (
            update(CompanyProfileRow)
            .where(CompanyProfileRow.id == company_id)
            .values(credits=CompanyProfileRow.credits + amount)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount == 1
