# core/logger.py

import logging

from core.config import LOG_FORMAT, LOG_LEVEL


def configure_logging(level: str | int | None = None) -> None:
    """
    Configures root logging for a CLI session.

    Args:
        level (str | int | None): Overrides the configured `LOG_LEVEL` when given.

    Notes:
        - Log records go to stderr so they never mix into menu output on stdout.
        - Calling this more than once has no effect, as with `logging.basicConfig()`.
    """
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
