"""
Centralized error handlers for FastAPI.

Maps trade ledger errors to HTTP responses. No stack traces or
internal details are exposed to clients.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.domain.trades.errors import (
    InvalidTradeRequestError,
    TradeDomainError,
    TradeNotFoundError,
)

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_422 = 422
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: Optional[Any] = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register the trade ledger error handlers on the FastAPI application."""

    @app.exception_handler(TradeNotFoundError)
    async def handle_trade_not_found(
        _request: Request, exc: TradeNotFoundError
    ) -> JSONResponse:
        logger.warning("Trade not found: %s", exc.trade_id)
        return _error_response(
            HTTP_404, "Trade not found", f"No trade with id {exc.trade_id!r}"
        )

    @app.exception_handler(InvalidTradeRequestError)
    async def handle_invalid_trade_request(
        _request: Request, exc: InvalidTradeRequestError
    ) -> JSONResponse:
        logger.warning("Invalid trade request: %s", "; ".join(exc.errors))
        return _error_response(
            HTTP_422, "Invalid trade request", exc.errors
        )

    @app.exception_handler(TradeDomainError)
    async def handle_trade_domain(
        _request: Request, exc: TradeDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled trade domain errors."""
        logger.error("Unhandled trade domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
