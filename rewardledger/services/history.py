"""History querysets: filtering always happens before ordering."""

from datetime import datetime

from django.db.models import QuerySet

from rewardledger.models import RewardPointsEntry

NEWEST_FIRST = ("-created_on_utc", "-id")


def history_queryset(
    customer_id: int,
    show_hidden: bool,
    now: datetime,
    store_id: int | None = None,
) -> QuerySet[RewardPointsEntry]:
    """
    Entries for a history listing, newest first.

    Args:
        customer_id: Customer identifier; 0 to list every customer
        show_hidden: Include future-dated entries and every store
        now: Evaluation time
        store_id: Store filter applied when not showing hidden entries;
            None when points accumulate for all stores
    """
    qs = RewardPointsEntry.objects.all()
    if customer_id > 0:
        qs = qs.filter(customer_id=customer_id)
    if not show_hidden:
        # only the points that already accrued
        qs = qs.filter(created_on_utc__lt=now)
        if store_id is not None:
            qs = qs.filter(store_id=store_id)
    return qs.order_by(*NEWEST_FIRST)


def balance_queryset(
    customer_id: int,
    now: datetime,
    store_id: int | None = None,
) -> QuerySet[RewardPointsEntry]:
    """Accrued entries of one scope, newest first. store_id=None spans all stores."""
    qs = RewardPointsEntry.objects.filter(
        customer_id=customer_id,
        created_on_utc__lt=now,
    )
    if store_id is not None:
        qs = qs.filter(store_id=store_id)
    return qs.order_by(*NEWEST_FIRST)


def pending_scopes(now: datetime, customer_id: int = 0, store_id: int = 0) -> QuerySet:
    """Distinct (customer_id, store_id) pairs with effective entries still lacking a balance."""
    qs = RewardPointsEntry.objects.filter(
        points_balance__isnull=True,
        created_on_utc__lt=now,
    )
    if customer_id > 0:
        qs = qs.filter(customer_id=customer_id)
    if store_id > 0:
        qs = qs.filter(store_id=store_id)
    return qs.order_by("customer_id", "store_id").values_list("customer_id", "store_id").distinct()
