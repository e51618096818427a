"""
Reward ledger configuration.

Usage in settings.py:
    REWARD_LEDGER = {
        "POINTS_ACCUMULATED_FOR_ALL_STORES": False,
        "CURRENT_STORE_ID": 1,
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class RewardLedgerSettings:
    """Reward ledger configuration settings."""

    # Balances are computed per customer only (True) or per customer+store (False)
    POINTS_ACCUMULATED_FOR_ALL_STORES: bool = False

    # Store used by SettingsStoreContext
    CURRENT_STORE_ID: int = 1

    # Collaborator backends (dotted paths)
    STORE_CONTEXT_BACKEND: str = "rewardledger.adapters.settings_store.SettingsStoreContext"
    NOTIFICATION_BACKEND: str = "rewardledger.adapters.signals.SignalNotificationSink"
    CLOCK_BACKEND: str = "rewardledger.adapters.clock.DjangoClock"


def get_reward_ledger_settings() -> RewardLedgerSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "REWARD_LEDGER", {})
    return RewardLedgerSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_reward_ledger_settings(), name)


reward_ledger_settings = _LazySettings()
