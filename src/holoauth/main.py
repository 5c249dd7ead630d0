"""Application entry point for the Hologram auth server."""

import structlog

from holoauth.app import App
from holoauth.config import Config
from holoauth.core.core import Core
from holoauth.logging import setup_logging
from holoauth.web.runner import run_server

logger = structlog.get_logger(__name__)


def main() -> None:
    config = Config()
    setup_logging(config.debug)
    app = App(Core.from_config(config))
    logger.info("server_starting", host=config.host, port=config.port)
    run_server(app, config)


if __name__ == "__main__":
    main()
