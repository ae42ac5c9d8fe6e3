"""Configuration for Beacon SDK."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from beacon.debug import configure_logging
from beacon.dsn import Dsn, is_valid_dsn
from beacon.types import DsnLike

__all__ = ["DSN_ENV_VAR", "BeaconOptions", "is_valid_dsn", "resolve_dsn"]

DSN_ENV_VAR = "BEACON_DSN"

logger = logging.getLogger(__name__)


@dataclass
class BeaconOptions:
    """Configuration options for Beacon SDK."""

    dsn: DsnLike | None = None
    debug: bool = False


def resolve_dsn(options: BeaconOptions) -> Dsn | None:
    """
    Resolve the DSN to send events to.

    Falls back to the ``BEACON_DSN`` environment variable when the options
    carry no DSN. An empty DSN disables the SDK.

    Args:
        options: The SDK options

    Returns:
        The validated ``Dsn``, or None when no DSN is configured

    Raises:
        InvalidDsn: If the configured DSN is invalid
    """
    configure_logging(options.debug)

    value = options.dsn
    if not value:
        value = os.environ.get(DSN_ENV_VAR, "")
        if value:
            logger.debug("Using DSN from %s", DSN_ENV_VAR)

    if not value:
        logger.debug("No DSN configured, SDK disabled")
        return None

    dsn = Dsn.parse(value)
    logger.debug("DSN configured for %s", dsn)
    return dsn
