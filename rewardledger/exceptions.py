"""Reward ledger exceptions."""


class BaseError(Exception):
    """
    Structured exception carrying a machine-readable code.

    The message defaults to the class-level ``_default_messages`` entry for
    the code; extra keyword arguments are kept in ``data``.
    """

    _default_messages: dict[str, str] = {}

    def __init__(self, code: str, message: str | None = None, **data):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.data = data
        super().__init__(self.message)

    def __str__(self):
        return f"[{self.code}] {self.message}"

    def as_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "data": self.data}


class RewardLedgerError(BaseError):
    """
    Structured exception for reward ledger operations.

    Usage:
        try:
            service.append_entry(customer, store_id, points)
        except RewardLedgerError as e:
            if e.code == "INVALID_STORE":
                handle_bad_store()
    """

    _default_messages = {
        "INVALID_CUSTOMER": "Customer reference is required",
        "INVALID_STORE": "Store ID should be valid",
        "INVALID_ENTRY": "Reward points history entry is required",
        "INVALID_PAGE_SIZE": "Page size must be positive",
    }


class InvalidArgument(RewardLedgerError, ValueError):
    """Invalid input rejected before any read or write."""
