"""Package-local logging utilities.

citeflow is a library first and stays silent unless the host application
configures logging. CLI users can opt into logs via ``CITEFLOW_LOG_LEVEL``
or the ``-v`` / ``--log-level`` flags.
"""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "citeflow"
LOG_LEVEL_ENV = "CITEFLOW_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def configure_logging(level: str | None = None) -> None:
    """Configure package logging for CLI/runtime diagnostics.

    ``level`` comes from the CLI (``--log-level`` wins over ``-v`` / ``-vv``,
    which map to INFO / DEBUG). Without it ``CITEFLOW_LOG_LEVEL`` is used, and
    when neither is set the package logger is reset to a ``NullHandler`` so
    library callers stay silent.
    """
    env_level = os.getenv(LOG_LEVEL_ENV, "")
    raw_level = level if level is not None else (env_level or "")
    resolved_level = raw_level.strip()
    pkg_logger = logging.getLogger(LOGGER_NAME)
    # Reset handlers so repeated CLI calls never write to a stale stderr.
    pkg_logger.handlers = []

    if not resolved_level:
        pkg_logger.addHandler(logging.NullHandler())
        pkg_logger.setLevel(logging.NOTSET)
        pkg_logger.propagate = False
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(getattr(logging, resolved_level.upper(), logging.INFO))
    pkg_logger.propagate = False
