"""Tests for the credit-gated unlock transaction."""

from __future__ import annotations

from uuid import uuid4

import pytest

from talent_match_core.config.settings import Settings
from talent_match_core.exceptions import UnlockError
from talent_match_core.models.candidate import CandidateProfile
from talent_match_core.models.enums import UnlockErrorCode
from talent_match_core.models.unlock import UnlockRecord
from talent_match_engine.unlock.service import ATTEMPT_ACTION, SUCCESS_ACTION, UnlockService
from tests.mocks.fake_store import FakeCreditLedger, FakeTalentStore
from tests.mocks.mock_factories import make_candidate, make_requester
from tests.mocks.mock_settings import make_settings


@pytest.fixture
def candidate() -> CandidateProfile:
    """An unlockable candidate with a UUID id."""
    return make_candidate(id=str(uuid4()))


@pytest.fixture
def service(
    candidate: CandidateProfile, fake_ledger: FakeCreditLedger, settings: Settings
) -> UnlockService:
    """Service over a store holding ``candidate`` and a ledger with 3 credits."""
    return UnlockService(FakeTalentStore(candidates=[candidate]), fake_ledger, settings)


@pytest.mark.unit
class TestUnlockSuccess:
    """Test successful and idempotent unlocks."""

    async def test_first_unlock_charges(
        self, service: UnlockService, fake_ledger: FakeCreditLedger, candidate: CandidateProfile
    ) -> None:
        """A first unlock deducts the cost and returns the full profile."""
        requester = make_requester()
        result = await service.unlock(candidate.id, requester)

        assert result.already_unlocked is False
        assert result.credits_remaining == 2
        assert result.candidate.email == candidate.email
        assert result.unlock.unlocked_by == requester.user_id
        assert result.unlock.cost == 1
        assert fake_ledger.credits["company-1"] == 2

        [event] = fake_ledger.audit_events
        assert event.action == SUCCESS_ACTION
        assert event.success is True
        assert event.metadata["credits_remaining"] == 2

    async def test_second_unlock_is_free(
        self, service: UnlockService, fake_ledger: FakeCreditLedger, candidate: CandidateProfile
    ) -> None:
        """Unlocking twice charges once and returns the original record."""
        requester = make_requester()
        first = await service.unlock(candidate.id, requester)
        second = await service.unlock(candidate.id, make_requester())

        assert second.already_unlocked is True
        assert second.unlock == first.unlock
        assert second.credits_remaining == 2
        assert fake_ledger.credits["company-1"] == 2

    async def test_already_unlocked_with_zero_credits(
        self, service: UnlockService, fake_ledger: FakeCreditLedger, candidate: CandidateProfile
    ) -> None:
        """An existing unlock is returned even when the balance is empty."""
        await service.unlock(candidate.id, make_requester())
        fake_ledger.credits["company-1"] = 0

        result = await service.unlock(candidate.id, make_requester())
        assert result.already_unlocked is True
        assert result.credits_remaining == 0

    async def test_cost_from_settings(
        self, candidate: CandidateProfile, fake_ledger: FakeCreditLedger
    ) -> None:
        """The unlock cost is configurable."""
        service = UnlockService(
            FakeTalentStore(candidates=[candidate]),
            fake_ledger,
            make_settings(unlock_cost_credits=3),
        )
        result = await service.unlock(candidate.id, make_requester())
        assert result.credits_remaining == 0
        assert result.unlock.cost == 3

    async def test_audit_failure_does_not_fail_unlock(
        self, service: UnlockService, fake_ledger: FakeCreditLedger, candidate: CandidateProfile
    ) -> None:
        """Audit write errors are logged, not raised."""
        fake_ledger.fail_audit = True
        result = await service.unlock(candidate.id, make_requester())
        assert result.credits_remaining == 2


@pytest.mark.unit
class TestUnlockRefusals:
    """Test each refusal code."""

    async def test_invalid_candidate_id(
        self, service: UnlockService, fake_ledger: FakeCreditLedger
    ) -> None:
        """Non-UUID ids are rejected before any lookup."""
        with pytest.raises(UnlockError) as exc_info:
            await service.unlock("not-a-uuid", make_requester())
        assert exc_info.value.code is UnlockErrorCode.INVALID_REQUEST
        assert fake_ledger.audit_events == []

    async def test_not_a_recruiter(
        self, service: UnlockService, fake_ledger: FakeCreditLedger, candidate: CandidateProfile
    ) -> None:
        """Only recruiters may unlock."""
        with pytest.raises(UnlockError) as exc_info:
            await service.unlock(candidate.id, make_requester(role="candidate"))
        assert exc_info.value.code is UnlockErrorCode.UNAUTHORIZED
        [event] = fake_ledger.audit_events
        assert event.action == ATTEMPT_ACTION
        assert event.success is False
        assert event.metadata["error"] == "Not a recruiter"

    async def test_no_company(self, service: UnlockService, candidate: CandidateProfile) -> None:
        """A recruiter without a company is unauthorized."""
        with pytest.raises(UnlockError) as exc_info:
            await service.unlock(candidate.id, make_requester(company_id=None))
        assert exc_info.value.code is UnlockErrorCode.UNAUTHORIZED

    async def test_unknown_company(
        self, service: UnlockService, candidate: CandidateProfile
    ) -> None:
        """A company missing from the ledger is unauthorized."""
        with pytest.raises(UnlockError) as exc_info:
            await service.unlock(candidate.id, make_requester(company_id="ghost"))
        assert exc_info.value.code is UnlockErrorCode.UNAUTHORIZED

    async def test_insufficient_credits(
        self, service: UnlockService, fake_ledger: FakeCreditLedger, candidate: CandidateProfile
    ) -> None:
        """An empty balance is refused and nothing is recorded."""
        fake_ledger.credits["company-1"] = 0
        with pytest.raises(UnlockError) as exc_info:
            await service.unlock(candidate.id, make_requester())
        assert exc_info.value.code is UnlockErrorCode.INSUFFICIENT_CREDITS
        assert "You have 0 credits" in exc_info.value.message
        assert fake_ledger.unlocks == {}
        assert fake_ledger.credits["company-1"] == 0

    async def test_candidate_not_found(
        self, service: UnlockService, fake_ledger: FakeCreditLedger
    ) -> None:
        """Unknown candidates are not found and not charged."""
        with pytest.raises(UnlockError) as exc_info:
            await service.unlock(str(uuid4()), make_requester())
        assert exc_info.value.code is UnlockErrorCode.NOT_FOUND
        assert fake_ledger.credits["company-1"] == 3


@pytest.mark.unit
class TestUnlockConcurrency:
    """Test the compensation paths around the credit decrement."""

    async def test_balance_drained_between_check_and_deduct(
        self, service: UnlockService, fake_ledger: FakeCreditLedger, candidate: CandidateProfile
    ) -> None:
        """A failed conditional decrement is reported as insufficient credits."""

        async def drained(company_id: str, cost: int) -> int | None:
            return None

        fake_ledger.deduct_credits = drained  # type: ignore[method-assign]
        with pytest.raises(UnlockError) as exc_info:
            await service.unlock(candidate.id, make_requester())
        assert exc_info.value.code is UnlockErrorCode.INSUFFICIENT_CREDITS
        assert fake_ledger.unlocks == {}

    async def test_lost_race_refunds_and_returns_winner(
        self, service: UnlockService, fake_ledger: FakeCreditLedger, candidate: CandidateProfile
    ) -> None:
        """Losing the insert race refunds and returns the winning record."""
        winner = UnlockRecord(
            id="winner", candidate_id=candidate.id, company_id="company-1", cost=1
        )
        fake_ledger.race_winner = winner

        result = await service.unlock(candidate.id, make_requester())

        assert result.already_unlocked is True
        assert result.unlock.id == "winner"
        assert fake_ledger.refunds == [("company-1", 1)]
        assert fake_ledger.credits["company-1"] == 3
        assert result.credits_remaining == 3

    async def test_insert_failure_refunds(
        self, service: UnlockService, fake_ledger: FakeCreditLedger, candidate: CandidateProfile
    ) -> None:
        """Any other insert failure refunds and surfaces INVALID_REQUEST."""
        fake_ledger.fail_record = RuntimeError("disk full")

        with pytest.raises(UnlockError) as exc_info:
            await service.unlock(candidate.id, make_requester())

        assert exc_info.value.code is UnlockErrorCode.INVALID_REQUEST
        assert "refunded" in exc_info.value.message
        assert fake_ledger.credits["company-1"] == 3
        assert fake_ledger.audit_events[-1].metadata["db_error"] == "disk full"


@pytest.mark.unit
class TestUnlockStoreOutage:
    """Test that store outages surface as coded unlock errors."""

    async def test_ledger_offline_is_invalid_request(
        self, service: UnlockService, fake_ledger: FakeCreditLedger, candidate: CandidateProfile
    ) -> None:
        """An unreachable ledger raises INVALID_REQUEST and records the attempt."""
        fake_ledger.offline = True

        with pytest.raises(UnlockError) as exc_info:
            await service.unlock(candidate.id, make_requester())

        assert exc_info.value.code is UnlockErrorCode.INVALID_REQUEST
        [event] = fake_ledger.audit_events
        assert event.action == ATTEMPT_ACTION
        assert event.success is False
        assert event.metadata["db_error"] == "ledger offline"

    async def test_store_offline_is_invalid_request(
        self, fake_ledger: FakeCreditLedger, settings: Settings, candidate: CandidateProfile
    ) -> None:
        """A candidate lookup failure raises INVALID_REQUEST without charging."""
        store = FakeTalentStore(candidates=[candidate])
        store.fail = True
        service = UnlockService(store, fake_ledger, settings)

        with pytest.raises(UnlockError) as exc_info:
            await service.unlock(candidate.id, make_requester())

        assert exc_info.value.code is UnlockErrorCode.INVALID_REQUEST
        assert fake_ledger.credits["company-1"] == 3

    async def test_failed_refund_still_coded(
        self, service: UnlockService, fake_ledger: FakeCreditLedger, candidate: CandidateProfile
    ) -> None:
        """An insert failure whose refund also fails is still INVALID_REQUEST."""
        fake_ledger.fail_record = RuntimeError("disk full")
        fake_ledger.fail_refund = True

        with pytest.raises(UnlockError) as exc_info:
            await service.unlock(candidate.id, make_requester())

        assert exc_info.value.code is UnlockErrorCode.INVALID_REQUEST
        assert "refunded" not in exc_info.value.message
        assert fake_ledger.audit_events[-1].metadata["refunded"] is False

    async def test_failed_refund_after_lost_race_is_coded(
        self, service: UnlockService, fake_ledger: FakeCreditLedger, candidate: CandidateProfile
    ) -> None:
        """A refund failure after losing the insert race raises INVALID_REQUEST."""
        fake_ledger.race_winner = UnlockRecord(
            id="winner", candidate_id=candidate.id, company_id="company-1", cost=1
        )
        fake_ledger.fail_refund = True

        with pytest.raises(UnlockError) as exc_info:
            await service.unlock(candidate.id, make_requester())

        assert exc_info.value.code is UnlockErrorCode.INVALID_REQUEST
