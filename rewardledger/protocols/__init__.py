"""Reward ledger protocols."""

from rewardledger.protocols.scope import Clock, StoreContext
from rewardledger.protocols.notifications import NotificationSink

__all__ = [
    "Clock",
    "StoreContext",
    "NotificationSink",
]
