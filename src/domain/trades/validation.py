import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from src.domain.trades.dtos.trade_dto import TradeCreateDTO

# Plain decimal notation only: no whitespace, digit underscores, NaN or Infinity
DECIMAL_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


@dataclass(frozen=True)
class TradeValidationResult:
    ok: bool
    errors: List[str] = field(default_factory=list)


def _parse_decimal(value: Optional[str]) -> Optional[Decimal]:
    if value is None or not DECIMAL_PATTERN.fullmatch(value):
        return None
    try:
        parsed = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return None
    if not parsed.is_finite():
        return None
    return parsed


def validate_trade_request(request: TradeCreateDTO) -> TradeValidationResult:
    """
    Check the amount/fee rules of a creation request.

    Every broken rule is reported, not only the first one.
    Never raises; the caller decides what to do with a failed result.
    """
    errors: List[str] = []

    amount = _parse_decimal(request.amount)
    if amount is None:
        errors.append(f"amount must be a decimal number, got {request.amount!r}")
    elif amount <= 0:
        errors.append(f"amount must be positive, got {request.amount!r}")

    if request.fee is not None:
        fee = _parse_decimal(request.fee)
        if fee is None:
            errors.append(f"fee must be a decimal number, got {request.fee!r}")
        elif fee < 0:
            errors.append(f"fee must not be negative, got {request.fee!r}")

    if (request.fee is None) != (request.fee_asset is None):
        errors.append("fee and feeAsset must be provided together")

    return TradeValidationResult(ok=not errors, errors=errors)
