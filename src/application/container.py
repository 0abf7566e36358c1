from dependency_injector import containers, providers
from src.infrastructure.config.settings import Settings
from src.domain.trades.trade_ledger import TradeLedger


class Container(containers.DeclarativeContainer):
    config = providers.Singleton(Settings)

    trade_ledger = providers.Singleton(TradeLedger)
