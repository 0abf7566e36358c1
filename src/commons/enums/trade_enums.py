from enum import Enum


class ExchangeEnum(str, Enum):
    BINANCE = "binance"
    COINBASE = "coinbase"
    KRAKEN = "kraken"


class TradeSideEnum(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
