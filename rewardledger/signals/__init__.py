"""
Reward ledger signals: public event API.

Emitted signals (by adapters.signals.SignalNotificationSink):
- entry_inserted: a history entry was created
- entry_updated: a history entry was saved (corrections and lazy balance fills)
"""

from django.dispatch import Signal

entry_inserted = Signal()  # sender=RewardPointsEntry, instance=entry
entry_updated = Signal()  # sender=RewardPointsEntry, instance=entry
