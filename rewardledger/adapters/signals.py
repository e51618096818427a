"""NotificationSink adapters."""

import logging

from rewardledger.signals import entry_inserted, entry_updated

logger = logging.getLogger(__name__)


class SignalNotificationSink:
    """Adapter: publishes entry changes as Django signals."""

    def entity_inserted(self, entry) -> None:
        logger.debug("Entry %s inserted (customer=%s)", entry.pk, entry.customer_id)
        entry_inserted.send(sender=type(entry), instance=entry)

    def entity_updated(self, entry) -> None:
        logger.debug("Entry %s updated (customer=%s)", entry.pk, entry.customer_id)
        entry_updated.send(sender=type(entry), instance=entry)


class NullNotificationSink:
    """Adapter: discards every notification."""

    def entity_inserted(self, entry) -> None:
        pass

    def entity_updated(self, entry) -> None:
        pass
