"""Candidate ranking pipeline: fetch, aggregate, score, filter, sort, truncate."""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING

import structlog

from talent_match_core.models.candidate import CandidateProfile
from talent_match_core.models.company import CompanyProfile
from talent_match_core.models.job import AggregatedSkill
from talent_match_core.models.match import CandidateMatch, RecentCandidatesPage
from talent_match_engine.ranking.requirements import aggregate_requirements
from talent_match_engine.scoring.aggregator import MatchScorer

if TYPE_CHECKING:
    from talent_match_core.config.settings import Settings
    from talent_match_core.interfaces.store import TalentStore

logger = structlog.get_logger()


class CandidateRanker:
    """Rank a candidate pool against a company and serve the recent-candidates feed.

    Ranking is advisory: when the target or the pool cannot be fetched the
    ranker returns an empty result instead of raising.
    """

    def __init__(
        self,
        store: TalentStore,
        settings: Settings,
        scorer: MatchScorer | None = None,
    ) -> None:
        """Initialize with a data store, settings and an optional scorer."""
        self.store = store
        self.settings = settings
        self.scorer = scorer or MatchScorer.from_settings(settings)

    async def get_aggregated_requirements(self, target_id: str) -> list[AggregatedSkill]:
        """Build the aggregated skill profile from the target's published jobs."""
        jobs = await self.store.list_published_jobs(target_id)
        return aggregate_requirements(jobs, max_skills=self.settings.max_aggregated_skills)

    async def rank_candidates(
        self,
        target_id: str,
        limit: int | None = None,
        candidate_pool: list[CandidateProfile] | None = None,
    ) -> list[CandidateMatch]:
        """Return the best-matching candidates for a company, best first.

        Args:
            target_id: Company to rank candidates against.
            limit: Maximum number of matches; defaults to settings.
            candidate_pool: Candidates to rank. Fetched from the store when None.

        Returns:
            Matches at or above the minimum score, sorted by overall score
            descending (ties keep pool order), truncated to ``limit``.
        """
        limit = self.settings.default_match_limit if limit is None else limit
        logger.info("ranking_start", target_id=target_id, limit=limit)
        start = time.monotonic()

        fetched = await self._fetch(target_id, candidate_pool)
        if fetched is None:
            return []
        company, requirements, pool = fetched

        matches = [
            CandidateMatch(
                candidate=candidate,
                breakdown=self.scorer.score(candidate, company, requirements),
            )
            for candidate in pool
        ]
        threshold = self.settings.min_match_score
        eligible = [m for m in matches if m.overall_score >= threshold]
        eligible.sort(key=lambda m: m.overall_score, reverse=True)

        results = eligible[: max(limit, 0)]
        for rank, match in enumerate(results, start=1):
            match.rank = rank

        logger.info(
            "ranking_end",
            target_id=target_id,
            pool_size=len(pool),
            requirements=len(requirements),
            above_threshold=len(eligible),
            returned=len(results),
            duration_seconds=round(time.monotonic() - start, 3),
        )
        return results

    async def _fetch(
        self,
        target_id: str,
        candidate_pool: list[CandidateProfile] | None,
    ) -> tuple[CompanyProfile, list[AggregatedSkill], list[CandidateProfile]] | None:
        """Fetch target, requirements and pool concurrently; None on any failure.

        Fetches still running when one fails or the timeout expires are
        cancelled and awaited before returning.
        """

        async def _pool() -> list[CandidateProfile]:
            if candidate_pool is not None:
                return candidate_pool
            return await self.store.list_active_candidates(self.settings.candidate_pool_size)

        company_task = asyncio.create_task(self.store.get_company(target_id))
        requirements_task = asyncio.create_task(self.get_aggregated_requirements(target_id))
        pool_task = asyncio.create_task(_pool())
        tasks = (company_task, requirements_task, pool_task)

        try:
            await asyncio.wait_for(
                asyncio.gather(*tasks),
                timeout=self.settings.fetch_timeout_seconds,
            )
            company = company_task.result()
            requirements = requirements_task.result()
            pool = pool_task.result()
        except TimeoutError:
            logger.warning(
                "ranking_fetch_timeout",
                target_id=target_id,
                timeout_seconds=self.settings.fetch_timeout_seconds,
            )
            return None
        except Exception as e:
            logger.warning(
                "ranking_fetch_failed",
                target_id=target_id,
                error_type=type(e).__name__,
                error=str(e),
            )
            return None
        finally:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

        if company is None:
            logger.info("ranking_target_not_found", target_id=target_id)
            return None
        return company, requirements, pool

    async def list_recent_candidates(
        self,
        page: int = 0,
        page_size: int | None = None,
    ) -> RecentCandidatesPage:
        """Return one unranked, newest-first page of active candidates."""
        page_size = self.settings.recent_page_size if page_size is None else page_size
        if page < 0 or page_size < 1:
            msg = f"invalid page ({page}) or page_size ({page_size})"
            raise ValueError(msg)

        offset = page * page_size
        try:
            candidates, total = await self.store.list_recent_candidates(offset, page_size)
        except Exception as e:
            logger.warning(
                "recent_candidates_failed",
                page=page,
                error_type=type(e).__name__,
                error=str(e),
            )
            return RecentCandidatesPage(page=page, page_size=page_size)

        return RecentCandidatesPage(
            candidates=candidates,
            has_more=offset + page_size < total,
            page=page,
            page_size=page_size,
            total=total,
        )
