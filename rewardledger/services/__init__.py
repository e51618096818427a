"""Reward ledger services.

- balance: lazy running-balance resolution over a scope's history
- history: filtered, newest-first querysets for listings and balances
- writer: the single write path (insert/update + notification)

The public API composing them is rewardledger.service.RewardPointService.
"""

from rewardledger.services import balance
from rewardledger.services import history
from rewardledger.services import writer

__all__ = ["balance", "history", "writer"]
