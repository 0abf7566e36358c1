import logging.config
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.application.container import Container
from src.application.error_handlers import register_error_handlers
from src.application.lifecycle import lifespan
from src.application.module_registry import register_modules


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Build the API with its own container, so every app owns a separate ledger.
    """
    container = container or Container()
    settings = container.config()

    logging.config.dictConfig(settings.get_logging_config())

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_error_handlers(app)
    register_modules(app, container)

    return app


if __name__ == "__main__":
    uvicorn.run("src.main:create_app", factory=True, host="0.0.0.0", port=8000)
