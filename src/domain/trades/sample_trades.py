from typing import List

from src.commons.enums.trade_enums import ExchangeEnum, TradeSideEnum
from src.domain.trades.dtos.trade_dto import TradeCreateDTO, TradeDTO
from src.domain.trades.trade_ledger import TradeLedger


SAMPLE_TRADES: List[TradeCreateDTO] = [
    TradeCreateDTO(
        exchange=ExchangeEnum.BINANCE,
        base_asset="BTC",
        quote_asset="USDT",
        side=TradeSideEnum.BUY,
        amount="0.5",
    ),
    TradeCreateDTO(
        exchange=ExchangeEnum.COINBASE,
        base_asset="ETH",
        quote_asset="EUR",
        side=TradeSideEnum.SELL,
        amount="2.0",
    ),
]


def seed_sample_trades(ledger: TradeLedger) -> List[TradeDTO]:
    """Record the sample trades through the regular create path."""
    return [ledger.create(request) for request in SAMPLE_TRADES]
