"""Pytest fixtures for Reward Ledger tests."""

from datetime import timedelta

import pytest
from django.utils import timezone

from rewardledger.models import RewardPointsEntry
from rewardledger.service import RewardPointService

CUSTOMER_ID = 1001
OTHER_CUSTOMER_ID = 2002
STORE_ID = 1
OTHER_STORE_ID = 2


class FrozenClock:
    """Clock that only moves when told to."""

    def __init__(self, now=None):
        self._now = now or timezone.now().replace(microsecond=0)

    def now(self):
        return self._now

    def advance(self, **kwargs):
        self._now += timedelta(**kwargs)


class RecordingSink:
    """NotificationSink that keeps every event."""

    def __init__(self):
        self.inserted = []
        self.updated = []

    def entity_inserted(self, entry):
        self.inserted.append(entry.pk)

    def entity_updated(self, entry):
        self.updated.append(entry.pk)


class FixedStoreContext:
    def __init__(self, store_id=STORE_ID):
        self.store_id = store_id

    def current_store_id(self):
        return self.store_id


@pytest.fixture
def clock():
    return FrozenClock()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def store_context():
    return FixedStoreContext()


@pytest.fixture
def service(db, clock, sink, store_context):
    """Per-store service with injected collaborators."""
    return RewardPointService(
        clock=clock,
        notifier=sink,
        store_context=store_context,
        points_accumulated_for_all_stores=False,
    )


@pytest.fixture
def global_service(db, clock, sink, store_context):
    """Service with points accumulated across all stores."""
    return RewardPointService(
        clock=clock,
        notifier=sink,
        store_context=store_context,
        points_accumulated_for_all_stores=True,
    )


@pytest.fixture
def make_entry(db, clock):
    """Insert an entry directly, bypassing the service (no eager balance)."""

    def _make(points, days=0, customer_id=CUSTOMER_ID, store_id=STORE_ID, balance=None, **kwargs):
        return RewardPointsEntry.objects.create(
            customer_id=customer_id,
            store_id=store_id,
            points=points,
            points_balance=balance,
            created_on_utc=clock.now() + timedelta(days=days),
            **kwargs,
        )

    return _make
