"""Aggregated skill profile built from a company's published jobs."""

from __future__ import annotations

from collections.abc import Iterable

from talent_match_core.constants import MAX_AGGREGATED_SKILLS
from talent_match_core.models.enums import JobStatus
from talent_match_core.models.job import AggregatedSkill, JobPosting


def aggregate_requirements(
    jobs: Iterable[JobPosting],
    max_skills: int = MAX_AGGREGATED_SKILLS,
) -> list[AggregatedSkill]:
    """Union the skill requirements of published jobs, most frequent first.

    A skill is keyed by its lower-cased name. The first occurrence supplies
    its level and years; it is upgraded to ``required`` if any job requires
    it. Skills with equal frequency keep their first-seen order.
    """
    aggregated: dict[str, AggregatedSkill] = {}
    for job in jobs:
        if job.status is not JobStatus.PUBLISHED:
            continue
        for skill in job.required_skills:
            existing = aggregated.get(skill.key)
            if existing is None:
                aggregated[skill.key] = AggregatedSkill(**skill.model_dump(), frequency=1)
                continue
            existing.frequency += 1
            if skill.weight == "required":
                existing.weight = "required"

    ranked = sorted(aggregated.values(), key=lambda s: s.frequency, reverse=True)
    return ranked[:max_skills]
