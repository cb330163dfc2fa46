# ==============================================
# Logging Setup
# ==============================================
#
# PURPOSE:
#   The package logs through loguru but stays silent until the
#   application opts in (naive_bayes/__init__.py disables the
#   "naive_bayes" logger namespace on import).
#
# FUNCTION:
# ---------
# - setup_logging(config: LoggingConfig | None = None) -> None
#     Re-enable the package's log records and add a stderr sink,
#     plus a rotating file sink when log_dir is configured.
#     Only the first call adds sinks.
#
# ==============================================

import os
import sys
from typing import Optional

from loguru import logger

from naive_bayes.config import LoggingConfig, get_config

_LOGGER_CONFIGURED = False

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}"


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Configure loguru sinks for the package, once per process.

    Args:
        config: Logging settings. If None, taken from get_config().
    """
    global _LOGGER_CONFIGURED

    logger.enable("naive_bayes")
    if _LOGGER_CONFIGURED:
        return

    config = config or get_config().logging

    logger.remove()
    logger.add(sys.stderr, level=config.level, format=LOG_FORMAT)

    if config.log_dir:
        os.makedirs(config.log_dir, exist_ok=True)
        logger.add(
            sink=os.path.join(config.log_dir, "naive_bayes_{time:YYYY-MM-DD}.log"),
            rotation="1 day",
            retention="30 days",
            level=config.level,
            format=LOG_FORMAT,
            enqueue=True,
        )

    _LOGGER_CONFIGURED = True
    logger.debug("Logging configured at level {}", config.level)
