#!/usr/bin/env python3
"""
BandHub Discovery Server — entrypoint for uvicorn bandhub_server.server:app.
"""

from .app import app
from .config import get_config


def main() -> None:
    import uvicorn

    config = get_config()
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
