"""Tests for lazy balance resolution."""

import pytest

from rewardledger.services.balance import resolve_balances, resolve_by_scope, scope_key

pytestmark = pytest.mark.django_db


def newest_first(*entries):
    return sorted(entries, key=lambda e: (e.created_on_utc, e.pk), reverse=True)


class TestResolveBalances:
    """Running balance over one scope, filled oldest first."""

    def test_empty_sequence(self, clock):
        saved = []
        assert resolve_balances([], clock.now(), saved.append) == []
        assert saved == []

    def test_chain(self, clock, make_entry):
        """Each balance is points plus the previous balance."""
        a = make_entry(100, days=-3)
        b = make_entry(-30, days=-2)
        c = make_entry(5, days=-1)
        saved = []

        result = resolve_balances(newest_first(a, b, c), clock.now(), saved.append)

        assert result == [c, b, a]
        assert [e.points_balance for e in result] == [75, 70, 100]
        assert saved == [a, b, c]

    def test_future_entries_left_unset(self, clock, make_entry):
        past = make_entry(20, days=-1)
        future = make_entry(50, days=1)
        saved = []

        resolve_balances(newest_first(past, future), clock.now(), saved.append)

        assert past.points_balance == 20
        assert future.points_balance is None
        assert saved == [past]

    def test_existing_balance_never_overwritten(self, clock, make_entry):
        """A stored balance is trusted as-is, even if the chain says otherwise."""
        a = make_entry(100, days=-2, balance=500)
        b = make_entry(10, days=-1)
        saved = []

        resolve_balances(newest_first(a, b), clock.now(), saved.append)

        assert a.points_balance == 500
        assert b.points_balance == 510
        assert saved == [b]

    def test_id_breaks_timestamp_ties(self, clock, make_entry):
        first = make_entry(10, days=-1)
        second = make_entry(5, days=-1)

        result = resolve_balances(newest_first(first, second), clock.now(), lambda e: None)

        assert result == [second, first]
        assert first.points_balance == 10
        assert second.points_balance == 15

    def test_scheduled_entry_filled_once_effective(self, clock, make_entry):
        past = make_entry(20, days=-1)
        future = make_entry(50, days=1)
        entries = newest_first(past, future)

        resolve_balances(entries, clock.now(), lambda e: None)
        assert future.points_balance is None

        clock.advance(days=2)
        saved = []
        resolve_balances(entries, clock.now(), saved.append)
        assert future.points_balance == 70
        assert saved == [future]

        saved.clear()
        resolve_balances(entries, clock.now(), saved.append)
        assert saved == []


class TestResolveByScope:
    """Mixed listings are resolved scope by scope."""

    def test_customers_do_not_share_a_chain(self, clock, make_entry):
        a = make_entry(100, days=-2, customer_id=1)
        b = make_entry(7, days=-1, customer_id=2)

        resolve_by_scope(newest_first(a, b), clock.now(), lambda e: None, all_stores=False)

        assert a.points_balance == 100
        assert b.points_balance == 7

    def test_stores_split_when_not_accumulated(self, clock, make_entry):
        a = make_entry(100, days=-2, store_id=1)
        b = make_entry(40, days=-1, store_id=2)

        resolve_by_scope(newest_first(a, b), clock.now(), lambda e: None, all_stores=False)

        assert b.points_balance == 40

    def test_stores_chain_when_accumulated(self, clock, make_entry):
        a = make_entry(100, days=-2, store_id=1)
        b = make_entry(40, days=-1, store_id=2)

        result = resolve_by_scope(newest_first(a, b), clock.now(), lambda e: None, all_stores=True)

        assert result == [b, a]
        assert b.points_balance == 140

    def test_scope_key(self, make_entry):
        entry = make_entry(1, customer_id=9, store_id=3)
        assert scope_key(entry, all_stores=False) == (9, 3)
        assert scope_key(entry, all_stores=True) == (9,)
