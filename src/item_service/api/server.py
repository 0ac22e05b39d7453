"""FastAPI application setup and routing for the item and greeting services."""

import logging
import sys
import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from .. import __version__
from . import greeting, health, items
from .config import Config
from .errors import register_exception_handlers
from .metrics import MetricsCollector
from .models import MetricsResponse
from .registry import ItemRegistry

logger = logging.getLogger(__name__)


def _configure_common(app: FastAPI, config: Config) -> None:
    """Attach configuration, CORS and operational endpoints shared by both services."""
    app.state.config = config
    app.state.started_at = time.time()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix="/v1", tags=["health"])


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Create and configure the item CRUD application."""
    config = config or Config.from_env()

    app = FastAPI(
        title="CRUD API Example",
        description="A simple CRUD API with Swagger docs",
        version=__version__,
        docs_url=config.docs_url,
        redoc_url=None,
    )
    _configure_common(app, config)

    if config.seed_items:
        app.state.registry = ItemRegistry.with_defaults(id_strategy=config.id_strategy)
    else:
        app.state.registry = ItemRegistry(id_strategy=config.id_strategy)

    app.state.metrics_collector = MetricsCollector()
    register_exception_handlers(app)

    # Middleware for metrics collection
    @app.middleware("http")
    async def metrics_middleware(request: Request, call_next):
        start_time = datetime.now(timezone.utc)
        endpoint = f"{request.method} {request.url.path}"
        success = False
        try:
            response = await call_next(request)
            success = 200 <= response.status_code < 400
            return response
        finally:
            duration = (datetime.now(timezone.utc) - start_time).total_seconds()
            app.state.metrics_collector.record_api_request(endpoint, duration, success)

    app.include_router(items.router, tags=["Items"])

    @app.get("/v1/metrics", response_model=MetricsResponse, tags=["monitoring"])
    async def get_metrics() -> MetricsResponse:
        """Get application metrics."""
        summary = app.state.metrics_collector.get_summary(item_count=len(app.state.registry))
        return MetricsResponse(**summary)

    return app


def create_greeting_app(config: Optional[Config] = None) -> FastAPI:
    """Create and configure the greeting application."""
    config = config or Config.from_env()

    app = FastAPI(
        title="My API",
        description="API documentation with Swagger",
        version=__version__,
        docs_url=config.docs_url,
        redoc_url=None,
    )
    _configure_common(app, config)
    app.include_router(greeting.router, tags=["Greeting"])

    return app


def serve(app: FastAPI, config: Config) -> None:
    """Run an application with uvicorn until interrupted."""
    import uvicorn

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger.info(f"Starting {app.title} server at {config.base_url}")
    if app.docs_url:
        logger.info(f"API docs available at {config.base_url}{app.docs_url}")

    try:
        uvicorn.run(
            app,
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Server startup failed: {e}")
        sys.exit(1)


def main():
    """Entry point for the item-api command."""
    try:
        config = Config.from_env()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)

    serve(create_app(config), config)


if __name__ == "__main__":
    main()
