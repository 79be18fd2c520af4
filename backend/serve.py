"""Run the user API with uvicorn.

Usage:
    python -m backend.serve
"""
import logging

import uvicorn

from backend.core import config
from backend.core.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    configure_logging(config.LOG_LEVEL)
    logger.info('Starting user API on http://%s:%s', config.HOST, config.PORT)

    from backend.main import app

    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
