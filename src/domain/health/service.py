import logging
from src.domain.trades.trade_ledger import TradeLedger

logger = logging.getLogger(__name__)


class HealthService:
    def __init__(self, ledger: TradeLedger):
        self.ledger = ledger

    def check(self) -> dict:
        trades = self.ledger.count()
        logger.debug(f"Health check: {trades} trades in ledger")
        return {"status": "healthy", "trades": trades}
