"""Public interface re-exports for talent_match_core."""

from talent_match_core.interfaces.store import CreditLedger, TalentStore

__all__ = [
    "CreditLedger",
    "TalentStore",
]
