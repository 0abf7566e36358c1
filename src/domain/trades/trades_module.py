from dependency_injector import containers, providers
from .trade_ledger import TradeLedger


class TradesModule(containers.DeclarativeContainer):
    trade_ledger = providers.Dependency(instance_of=TradeLedger)
