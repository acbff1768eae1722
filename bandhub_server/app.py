"""
BandHub Discovery API — FastAPI app factory.

Use: uvicorn bandhub_server.app:app
Or:  from bandhub_server import app
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_config
from .routes import register_routes
from .state import get_state

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, routes, and startup."""
    app = FastAPI(
        title="BandHub Discovery API",
        description="Video attribution and related-video discovery for marching band content",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)

    @app.on_event("startup")
    def _startup_logging():
        config = get_config()
        configure_logging(config.log_level)
        ok, errors = config.validate()
        for error in errors:
            logger.warning("Config: %s", error)
        state = get_state()
        logger.info(
            "BandHub Discovery API starting: %d organizations, data_dir=%s",
            len(state.store.get_organizations()),
            config.data_dir,
        )

    return app


app = create_app()
