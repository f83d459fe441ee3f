"""SQLAlchemy-backed TalentStore."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from talent_match_core.constants import ACTIVE_CANDIDATE_STATUSES
from talent_match_core.exceptions import StoreUnavailableError
from talent_match_core.models.candidate import CandidateProfile
from talent_match_core.models.company import CompanyProfile
from talent_match_core.models.enums import JobStatus
from talent_match_core.models.job import JobPosting
from talent_match_infra.db.mappers import candidate_from_row, company_from_row, job_from_row
from talent_match_infra.db.repositories.candidate_repo import CandidateRepository
from talent_match_infra.db.repositories.company_repo import CompanyRepository
from talent_match_infra.db.repositories.job_repo import JobRepository

_ACTIVE = [str(status) for status in ACTIVE_CANDIDATE_STATUSES]


class SqlTalentStore:
    """Read profiles and jobs through the repositories.

    Every call opens its own session, so the ranking pipeline can run
    its fetches concurrently.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize with a session factory."""
        self._session_factory = session_factory

    async def get_company(self, company_id: str) -> CompanyProfile | None:
        """Retrieve a company profile by ID."""
        try:
            async with self._session_factory() as session:
                row = await CompanyRepository(session).get_by_id(company_id)
                return company_from_row(row) if row is not None else None
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to load company {company_id}: {e}") from e

    async def get_candidate(self, candidate_id: str) -> CandidateProfile | None:
        """Retrieve a candidate profile by ID."""
        try:
            async with self._session_factory() as session:
                row = await CandidateRepository(session).get_by_id(candidate_id)
                return candidate_from_row(row) if row is not None else None
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to load candidate {candidate_id}: {e}") from e

    async def list_published_jobs(self, company_id: str) -> list[JobPosting]:
        """List a company's published jobs."""
        try:
            async with self._session_factory() as session:
                rows = await JobRepository(session).list_by_company(
                    company_id, str(JobStatus.PUBLISHED)
                )
                return [job_from_row(row) for row in rows]
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to load jobs for {company_id}: {e}") from e

    async def list_active_candidates(self, limit: int) -> list[CandidateProfile]:
        """List the most recent active candidates."""
        try:
            async with self._session_factory() as session:
                rows = await CandidateRepository(session).list_by_status(_ACTIVE, limit=limit)
                return [candidate_from_row(row) for row in rows]
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to load candidate pool: {e}") from e

    async def list_recent_candidates(
        self, offset: int, limit: int
    ) -> tuple[list[CandidateProfile], int]:
        """Return one newest-first page of active candidates and the total count."""
        try:
            async with self._session_factory() as session:
                repo = CandidateRepository(session)
                rows = await repo.list_by_status(_ACTIVE, limit=limit, offset=offset)
                total = await repo.count_by_status(_ACTIVE)
                return [candidate_from_row(row) for row in rows], total
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to load recent candidates: {e}") from e
