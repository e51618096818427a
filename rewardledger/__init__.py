"""
Django Reward Ledger - Loyalty reward points history.

Usage:
    from rewardledger import RewardPointService, InvalidArgument

    service = RewardPointService()
    service.append_entry(customer, store_id=1, points=100, message="Cadastro")
    balance = service.get_balance(customer.pk, store_id=1)
    page = service.get_history(customer.pk, page_index=0, page_size=20)

    # Scheduled accrual (balance computed once the date passes)
    service.append_entry(customer, 1, 50, accrual_date=next_week)
"""


def __getattr__(name):
    if name == "RewardPointService":
        from rewardledger.service import RewardPointService

        return RewardPointService
    if name == "RewardLedgerError":
        from rewardledger.exceptions import RewardLedgerError

        return RewardLedgerError
    if name == "InvalidArgument":
        from rewardledger.exceptions import InvalidArgument

        return InvalidArgument
    if name == "PagedList":
        from rewardledger.paging import PagedList

        return PagedList
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["RewardPointService", "RewardLedgerError", "InvalidArgument", "PagedList"]
__version__ = "0.1.0"
