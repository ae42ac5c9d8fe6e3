"""Debug logging for Beacon SDK."""

import logging

LOGGER_NAME = "beacon"
DEBUG_FORMAT = "[Beacon] %(message)s"

_handler: logging.Handler | None = None
_previous_level = logging.NOTSET


def configure_logging(debug: bool) -> None:
    """
    Toggle SDK debug output.

    When enabled, a stream handler printing ``[Beacon]``-prefixed messages is
    attached to the ``beacon`` logger. Disabling restores the level the logger
    had before; a logger the SDK never touched is left alone. The root logger
    is never modified.
    """
    global _handler, _previous_level

    logger = logging.getLogger(LOGGER_NAME)

    if not debug:
        if _handler is None:
            return
        logger.removeHandler(_handler)
        logger.setLevel(_previous_level)
        _handler = None
        return

    if _handler is None:
        _previous_level = logger.level
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
        logger.addHandler(_handler)

    logger.setLevel(logging.DEBUG)
