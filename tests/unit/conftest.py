"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from structlog.contextvars import clear_contextvars

from talent_match_core.config.settings import Settings
from talent_match_core.models.candidate import CandidateProfile
from talent_match_core.models.company import CompanyProfile
from tests.mocks.fake_store import FakeCreditLedger, FakeTalentStore
from tests.mocks.mock_factories import make_candidate, make_company
from tests.mocks.mock_settings import make_settings


@pytest.fixture
def settings() -> Settings:
    """Return a Settings instance with default matching policy."""
    return make_settings()


@pytest.fixture
def sample_candidate() -> CandidateProfile:
    """Return a well-matching active candidate."""
    return make_candidate()


@pytest.fixture
def sample_company() -> CompanyProfile:
    """Return a remote-first Series A company."""
    return make_company(id="company-1")


@pytest.fixture
def fake_store() -> FakeTalentStore:
    """Return an empty in-memory talent store."""
    return FakeTalentStore()


@pytest.fixture
def fake_ledger() -> FakeCreditLedger:
    """Return an in-memory credit ledger with credits for company-1."""
    return FakeCreditLedger(credits={"company-1": 3})


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Save and restore root logger handlers.

    configure_logging() replaces root handlers; stale StreamHandlers would
    otherwise write to pytest-captured streams that are already closed.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    clear_contextvars()
