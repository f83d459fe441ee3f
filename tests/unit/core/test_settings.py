"""Tests for Settings configuration."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from talent_match_core.config.settings import Settings


@pytest.mark.unit
class TestSettings:
    """Test Settings validation and defaults."""

    def test_default_settings(self) -> None:
        """Settings loads without any env vars and has the documented defaults."""
        with patch.dict(os.environ, {}, clear=True):
            s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.db_backend == "sqlite"
        assert s.min_match_score == 65
        assert s.culture_score_floor == 30
        assert s.neutral_skills_score == 50
        assert s.max_aggregated_skills == 20
        assert s.candidate_pool_size == 100
        assert s.default_match_limit == 4
        assert s.recent_page_size == 9
        assert s.unlock_cost_credits == 1
        assert s.match_weights.skills == 0.25

    def test_postgres_backend_sets_database_url(self) -> None:
        """When db_backend=postgres, database_url is set from postgres_url."""
        with patch.dict(os.environ, {"TM_DB_BACKEND": "postgres"}, clear=True):
            s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.database_url == s.postgres_url
        assert "asyncpg" in s.database_url

    def test_env_overrides_threshold(self) -> None:
        """Scoring thresholds are configurable through TM_ env vars."""
        env = {"TM_MIN_MATCH_SCORE": "80", "TM_UNLOCK_COST_CREDITS": "3"}
        with patch.dict(os.environ, env, clear=True):
            s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.min_match_score == 80
        assert s.unlock_cost_credits == 3

    def test_nested_weight_override(self) -> None:
        """Weights can be set as a nested JSON value."""
        weights = (
            '{"skills": 0.4, "industry": 0.1, "culture": 0.2,'
            ' "compensation": 0.1, "location": 0.1, "stage_fit": 0.1}'
        )
        with patch.dict(os.environ, {"TM_MATCH_WEIGHTS": weights}, clear=True):
            s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.match_weights.skills == 0.4

    def test_weights_must_sum_to_one(self) -> None:
        """An invalid weight table is rejected at load time."""
        with pytest.raises(ValidationError, match="sum to 1.0"):
            Settings(_env_file=None, match_weights={"skills": 0.9})  # type: ignore[call-arg]

    def test_threshold_out_of_range(self) -> None:
        """min_match_score must lie in [0, 100]."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, min_match_score=101)  # type: ignore[call-arg]

    def test_unknown_db_backend(self) -> None:
        """Only sqlite and postgres backends are accepted."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, db_backend="mysql")  # type: ignore[call-arg]
