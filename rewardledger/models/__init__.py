"""Reward ledger models."""

from rewardledger.models.entry import RewardPointsEntry

__all__ = ["RewardPointsEntry"]
