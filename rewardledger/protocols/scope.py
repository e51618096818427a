"""Request scope protocols: current store and evaluation clock."""

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class StoreContext(Protocol):
    """
    Resolves the store of the current request.

    Used by history listings that hide other stores' entries when points
    are not accumulated across all stores.

    Configuration in settings.py:
        REWARD_LEDGER = {
            "STORE_CONTEXT_BACKEND": "myshop.adapters.RequestStoreContext",
        }
    """

    def current_store_id(self) -> int:
        """Return the identifier of the current store."""
        ...


@runtime_checkable
class Clock(Protocol):
    """Source of "now" for effective-date checks."""

    def now(self) -> datetime:
        """Return the current aware datetime."""
        ...
