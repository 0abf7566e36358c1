from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.commons.enums.trade_enums import ExchangeEnum, TradeSideEnum


class TradeCreateDTO(BaseModel):
    """
    Trade creation request (Pydantic model).

    Only structural constraints live here. Amount/fee rules are checked
    by the ledger at creation time.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    exchange: ExchangeEnum
    base_asset: str = Field(..., min_length=1)
    quote_asset: str = Field(..., min_length=1)
    side: TradeSideEnum
    amount: str

    fee: Optional[str] = None
    fee_asset: Optional[str] = Field(default=None, min_length=1)


class TradeDTO(BaseModel):
    """
    Recorded trade execution (Pydantic model). Frozen once created.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str
    exchange: ExchangeEnum
    base_asset: str
    quote_asset: str
    side: TradeSideEnum
    amount: str
    timestamp: datetime

    fee: Optional[str] = None
    fee_asset: Optional[str] = None

