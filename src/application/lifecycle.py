from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from src.infrastructure.config.settings import Settings
from src.domain.trades.trade_ledger import TradeLedger
from src.domain.trades.sample_trades import seed_sample_trades

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting application...")
    settings: Settings = app.state.container.config()

    try:
        # Cargar trades de ejemplo si está habilitado
        if settings.seed_sample_trades:
            ledger: TradeLedger = app.state.trade_ledger
            seeded = seed_sample_trades(ledger)
            logger.info(f"Seeded {len(seeded)} sample trades")

        logger.info(
            f"{settings.app_name} {settings.app_version} started "
            f"({settings.environment.value})"
        )

        yield

    except Exception as e:
        logger.error(f"Error during startup: {str(e)}")
        raise

    finally:
        logger.info("Shutting down application...")
        trades = app.state.trade_ledger.count()
        logger.info(f"Application shut down successfully ({trades} trades discarded)")
