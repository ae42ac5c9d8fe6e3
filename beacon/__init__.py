"""
Beacon SDK for Python

DSN parsing, validation and rendering for event ingestion clients.

Usage:
    import beacon

    # Parse a DSN string
    dsn = beacon.Dsn.parse("https://public@sentry.example.com/123")

    # Or build one from components
    dsn = beacon.Dsn.from_components(
        {"protocol": "https", "user": "public", "host": "sentry.example.com", "project_id": "123"}
    )

    # Render it (the password is omitted unless asked for)
    print(dsn.to_string())

    # Derive the ingest endpoint
    url = beacon.store_endpoint(dsn)
"""

from beacon.api import auth_header, base_url, store_endpoint, store_endpoint_with_auth
from beacon.config import DSN_ENV_VAR, BeaconOptions, resolve_dsn
from beacon.debug import configure_logging
from beacon.dsn import Dsn, is_valid_dsn
from beacon.errors import (
    BeaconError,
    InvalidDsn,
    InvalidDsnFormat,
    InvalidPort,
    MissingComponent,
    UnsupportedProtocol,
)
from beacon.types import DsnComponents, DsnLike, DsnProtocol

__version__ = "0.1.0"
__all__ = [
    # DSN
    "Dsn",
    "is_valid_dsn",
    # Endpoints
    "base_url",
    "store_endpoint",
    "store_endpoint_with_auth",
    "auth_header",
    # Config
    "BeaconOptions",
    "resolve_dsn",
    "DSN_ENV_VAR",
    "configure_logging",
    # Errors
    "BeaconError",
    "InvalidDsn",
    "InvalidDsnFormat",
    "MissingComponent",
    "UnsupportedProtocol",
    "InvalidPort",
    # Types
    "DsnComponents",
    "DsnLike",
    "DsnProtocol",
]
