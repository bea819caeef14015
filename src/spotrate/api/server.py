"""Parking rates HTTP service.

Run locally::

    uv run spotrate-server

Or with uvicorn::

    uv run uvicorn spotrate.api.server:create_app --factory --port 9000
"""

import logging

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.routing import Route

from spotrate.api.routes import get_rate, health, prometheus_metrics, put_rates
from spotrate.core.config import load_service_config
from spotrate.rates.table import RateTable

logger = logging.getLogger(__name__)


def create_app(table: RateTable | None = None) -> Starlette:
    """Build the ASGI app.

    Args:
        table: Rate table to serve. When omitted, one is seeded from
            ``SEED_RATE_FILE``; a missing or invalid seed file raises.
    """
    if table is None:
        config = load_service_config()
        table = RateTable.from_seed_file(config.seed_rate_file)

    app = Starlette(
        routes=[
            Route("/health", health),
            Route("/rates", put_rates, methods=["PUT"]),
            Route("/rate", get_rate),
            Route("/metrics", prometheus_metrics),
        ],
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=["*"],
                allow_methods=["GET", "PUT", "HEAD", "OPTIONS"],
                allow_headers=["Content-Type"],
            ),
        ],
    )
    app.state.rate_table = table
    return app


def main() -> None:
    """Run the rates service with uvicorn."""
    import uvicorn

    config = load_service_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    table = RateTable.from_seed_file(config.seed_rate_file)
    app = create_app(table)

    logger.info("Starting rates service on %s:%d", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
