"""
Domain-specific errors for the trades ledger.

Raised by the ledger and mapped to HTTP responses by the application
error handlers. No framework imports allowed.
"""

from typing import List


class TradeDomainError(Exception):
    """Base error for all trade ledger errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class TradeNotFoundError(TradeDomainError):
    """Raised when no trade matches the requested id."""

    def __init__(self, trade_id: str) -> None:
        super().__init__(f"Trade not found: {trade_id}")
        self.trade_id = trade_id


class InvalidTradeRequestError(TradeDomainError):
    """Raised when a creation request breaks an amount or fee rule."""

    def __init__(self, errors: List[str]) -> None:
        super().__init__(f"Invalid trade request: {'; '.join(errors)}")
        self.errors = list(errors)
