from fastapi import FastAPI
from dependency_injector import providers
from src.application.container import Container


def register_modules(app: FastAPI, root_container: Container):
    settings = root_container.config()

    # Register Trades Module
    from src.domain.trades.trades_module import TradesModule
    from src.domain.trades.controller import router as trades_router

    trades_module = TradesModule(
        trade_ledger=root_container.trade_ledger,
    )

    app.include_router(trades_router, prefix=settings.api_prefix)
    app.state.trades_module = trades_module
    app.state.trade_ledger = trades_module.trade_ledger()

    # Register Health Module
    from src.domain.health.module import HealthModule
    from src.domain.health.controller import router as health_router

    health_container = HealthModule(
        root=providers.DependenciesContainer(
            trade_ledger=root_container.trade_ledger,
        )
    )

    app.include_router(health_router)
    app.state.health_container = health_container
