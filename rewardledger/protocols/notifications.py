"""Notification protocol for ledger entry changes."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from rewardledger.models import RewardPointsEntry


@runtime_checkable
class NotificationSink(Protocol):
    """
    Receives entry change events. Fire-and-forget: return values are ignored.

    Configuration in settings.py:
        REWARD_LEDGER = {
            "NOTIFICATION_BACKEND": "rewardledger.adapters.signals.SignalNotificationSink",
        }
    """

    def entity_inserted(self, entry: "RewardPointsEntry") -> None:
        """Called after a new entry is persisted."""
        ...

    def entity_updated(self, entry: "RewardPointsEntry") -> None:
        """Called after an existing entry is saved."""
        ...
