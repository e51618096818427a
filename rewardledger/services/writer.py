"""Writer: the only place entries are persisted.

Every write is followed by a notification on the injected sink.
"""

from rewardledger.exceptions import InvalidArgument
from rewardledger.models import RewardPointsEntry
from rewardledger.protocols import NotificationSink


def reference_id(ref) -> int | None:
    """Identifier of an opaque reference: a model instance (pk) or a plain int."""
    if ref is None:
        return None
    if isinstance(ref, int) and not isinstance(ref, bool):
        return ref
    return getattr(ref, "pk", None)


def insert_entry(entry: RewardPointsEntry, notifier: NotificationSink) -> RewardPointsEntry:
    """Persist a new entry and notify."""
    entry.save(force_insert=True)
    notifier.entity_inserted(entry)
    return entry


def update_entry(entry: RewardPointsEntry | None, notifier: NotificationSink) -> RewardPointsEntry:
    """
    Persist an existing entry and notify.

    Raises:
        InvalidArgument: If entry is None
    """
    if entry is None:
        raise InvalidArgument("INVALID_ENTRY")

    entry.save()
    notifier.entity_updated(entry)
    return entry
