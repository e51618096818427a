"""Balance resolution. Fills missing running balances, oldest entry first.

Each fill is saved on its own through ``update_entry`` (no batching, no
surrounding transaction), so an interrupted resolution leaves every balance
computed so far in place and the next read continues from there.

Balances that are already set are never recomputed. Correcting an older
entry therefore does not propagate to later ones.
"""

import logging
from collections.abc import Callable, Iterable
from datetime import datetime

from rewardledger.models import RewardPointsEntry

logger = logging.getLogger(__name__)


def resolve_balances(
    entries: list[RewardPointsEntry],
    now: datetime,
    update_entry: Callable[[RewardPointsEntry], object],
) -> list[RewardPointsEntry]:
    """
    Fill unset balances of effective entries in a single scope.

    Args:
        entries: Entries of ONE scope, newest first (created_on_utc, id desc)
        now: Evaluation time; entries after it keep an unset balance
        update_entry: Persists one filled entry

    Returns:
        The same list, same order
    """
    filled = 0
    previous = None
    for entry in reversed(entries):
        if entry.points_balance is None and entry.is_effective(now):
            previous_balance = previous.points_balance if previous is not None else 0
            entry.points_balance = entry.points + (previous_balance or 0)
            update_entry(entry)
            filled += 1
            logger.debug(
                "Filled balance of entry %s: %s",
                entry.pk,
                entry.points_balance,
            )
        previous = entry

    if filled:
        logger.info("Resolved %d reward points balance(s)", filled)
    return entries


def scope_key(entry: RewardPointsEntry, all_stores: bool) -> tuple:
    """(customer_id,) when points accumulate for all stores, else (customer_id, store_id)."""
    if all_stores:
        return (entry.customer_id,)
    return (entry.customer_id, entry.store_id)


def resolve_by_scope(
    entries: Iterable[RewardPointsEntry],
    now: datetime,
    update_entry: Callable[[RewardPointsEntry], object],
    all_stores: bool,
) -> list[RewardPointsEntry]:
    """
    Resolve a mixed listing scope by scope.

    Entries keep their relative order inside each scope, so a newest-first
    listing yields newest-first scopes. Returns the input as a list.
    """
    entries = list(entries)
    scopes: dict[tuple, list[RewardPointsEntry]] = {}
    for entry in entries:
        scopes.setdefault(scope_key(entry, all_stores), []).append(entry)

    for scoped in scopes.values():
        resolve_balances(scoped, now, update_entry)
    return entries
