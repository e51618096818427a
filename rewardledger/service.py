"""
Reward ledger public API.

CORE:
    RewardPointService.get_history(...)   - Paged history (lazy balances filled)
    RewardPointService.get_balance(...)   - Current balance of a scope
    RewardPointService.append_entry(...)  - Add a history entry
    RewardPointService.update_entry(...)  - Save a corrected entry
"""

import logging
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal

from django.utils import timezone
from django.utils.module_loading import import_string

from rewardledger.conf import reward_ledger_settings
from rewardledger.exceptions import InvalidArgument
from rewardledger.models import RewardPointsEntry
from rewardledger.paging import PagedList
from rewardledger.protocols import Clock, NotificationSink, StoreContext
from rewardledger.services import balance, history, writer

logger = logging.getLogger(__name__)


def _load_backend(path: str):
    """Instantiate a collaborator from its dotted path."""
    backend_class = import_string(path)
    return backend_class()


class RewardPointService:
    """
    Reward points history service.

    Collaborators are injected, or loaded from REWARD_LEDGER settings when
    omitted:
        clock          - CLOCK_BACKEND
        notifier       - NOTIFICATION_BACKEND
        store_context  - STORE_CONTEXT_BACKEND
        points_accumulated_for_all_stores - POINTS_ACCUMULATED_FOR_ALL_STORES

    Writes are not serialized: concurrent appends on the same scope can race
    on the eager balance. Callers that may write concurrently must serialize
    per (customer, store).
    """

    def __init__(
        self,
        clock: Clock | None = None,
        notifier: NotificationSink | None = None,
        store_context: StoreContext | None = None,
        points_accumulated_for_all_stores: bool | None = None,
    ):
        self.clock = clock or _load_backend(reward_ledger_settings.CLOCK_BACKEND)
        self.notifier = notifier or _load_backend(reward_ledger_settings.NOTIFICATION_BACKEND)
        self.store_context = store_context or _load_backend(
            reward_ledger_settings.STORE_CONTEXT_BACKEND
        )
        self._all_stores = points_accumulated_for_all_stores

    @property
    def points_accumulated_for_all_stores(self) -> bool:
        if self._all_stores is not None:
            return self._all_stores
        return reward_ledger_settings.POINTS_ACCUMULATED_FOR_ALL_STORES

    # ======================================================================
    # READ
    # ======================================================================

    def get_history(
        self,
        customer=0,
        show_hidden: bool = False,
        page_index: int = 0,
        page_size: int | None = None,
    ) -> PagedList:
        """
        Load reward points history.

        Balances are resolved over the whole filtered history before the page
        is cut, since each balance depends on every earlier entry.

        Args:
            customer: Customer (or its id); 0 to load every customer
            show_hidden: Include future-dated entries and entries of other
                stores
            page_index: Zero-based page
            page_size: Page size; None returns everything

        Returns:
            PagedList of RewardPointsEntry, newest first

        Raises:
            InvalidArgument: If page_size <= 0 (checked before any balance is saved)
        """
        if page_size is not None and page_size <= 0:
            raise InvalidArgument("INVALID_PAGE_SIZE", page_size=page_size)

        customer_id = writer.reference_id(customer) or 0
        all_stores = self.points_accumulated_for_all_stores
        now = self.clock.now()

        store_id = None
        if not show_hidden and not all_stores:
            store_id = self.store_context.current_store_id()

        qs = history.history_queryset(customer_id, show_hidden, now, store_id=store_id)
        entries = balance.resolve_by_scope(qs, now, self.update_entry, all_stores)

        return PagedList(entries, page_index, page_size)

    def get_balance(self, customer, store_id: int) -> int:
        """
        Current reward points balance.

        Args:
            customer: Customer (or its id)
            store_id: Store; ignored when points accumulate for all stores

        Returns:
            Balance of the newest accrued entry, 0 when there is none
        """
        customer_id = writer.reference_id(customer) or 0
        if customer_id <= 0:
            return 0

        now = self.clock.now()
        scope_store = None if self.points_accumulated_for_all_stores else store_id
        entries = list(history.balance_queryset(customer_id, now, store_id=scope_store))
        balance.resolve_balances(entries, now, self.update_entry)

        if not entries:
            return 0
        newest = entries[0]
        if newest.points_balance is None:
            logger.warning(
                "Entry %s has no balance after resolution (customer=%s, store=%s)",
                newest.pk,
                customer_id,
                scope_store,
            )
            return 0
        return newest.points_balance

    # ======================================================================
    # WRITE
    # ======================================================================

    def append_entry(
        self,
        customer,
        store_id: int,
        points: int,
        message: str = "",
        used_with_order=None,
        used_amount: Decimal = Decimal("0"),
        accrual_date: datetime | None = None,
    ) -> RewardPointsEntry:
        """
        Add a reward points history entry.

        Args:
            customer: Customer (or its id)
            store_id: Store identifier
            points: Points to add (negative to spend)
            message: Message
            used_with_order: Order (or its id) the points paid for
            used_amount: Amount redeemed against the order
            accrual_date: Scheduled accrual date; None accrues immediately

        Returns:
            Created RewardPointsEntry

        Raises:
            InvalidArgument: If customer is missing or store_id <= 0
        """
        customer_id = writer.reference_id(customer)
        if customer_id is None or customer_id <= 0:
            raise InvalidArgument("INVALID_CUSTOMER", customer=customer)
        if store_id is None or store_id <= 0:
            raise InvalidArgument("INVALID_STORE", store_id=store_id)

        if accrual_date is None:
            points_balance = self.get_balance(customer_id, store_id) + points
            created_on_utc = self.clock.now()
        else:
            points_balance = None
            created_on_utc = accrual_date
            if timezone.is_naive(created_on_utc):
                created_on_utc = timezone.make_aware(created_on_utc, dt_timezone.utc)

        entry = RewardPointsEntry(
            customer_id=customer_id,
            store_id=store_id,
            used_with_order_id=writer.reference_id(used_with_order),
            points=points,
            points_balance=points_balance,
            used_amount=used_amount,
            message=message,
            created_on_utc=created_on_utc,
        )
        writer.insert_entry(entry, self.notifier)

        logger.info(
            "Reward points entry %s: customer=%s store=%s points=%s balance=%s",
            entry.pk,
            customer_id,
            store_id,
            points,
            points_balance,
        )
        return entry

    def update_entry(self, entry: RewardPointsEntry) -> RewardPointsEntry:
        """
        Save a history entry (corrections and lazy balance fills).

        Raises:
            InvalidArgument: If entry is None
        """
        return writer.update_entry(entry, self.notifier)
