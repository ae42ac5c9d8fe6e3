"""Ingest endpoint helpers for Beacon SDK.

Derives the URLs and auth headers a transport needs from a ``Dsn``. Nothing
here performs I/O.
"""

import httpx

from beacon.dsn import Dsn

PROTOCOL_VERSION = "7"
AUTH_HEADER = "X-Sentry-Auth"


def _base(dsn: Dsn) -> str:
    port = f":{dsn.port}" if dsn.port else ""
    path = f"/{dsn.path}" if dsn.path else ""
    return f"{dsn.protocol}://{dsn.host}{port}{path}"


def base_url(dsn: Dsn) -> httpx.URL:
    """Build the base URL of the ingest host, including any path prefix."""
    return httpx.URL(_base(dsn))


def store_endpoint(dsn: Dsn) -> httpx.URL:
    """Build the store endpoint URL for the DSN's project."""
    return httpx.URL(f"{_base(dsn)}/api/{dsn.project_id}/store/")


def _auth_params(dsn: Dsn, client: str) -> dict[str, str]:
    params = {
        "sentry_version": PROTOCOL_VERSION,
        "sentry_client": client,
        "sentry_key": dsn.user,
    }
    if dsn.password:
        params["sentry_secret"] = dsn.password
    return params


def store_endpoint_with_auth(dsn: Dsn, client: str) -> httpx.URL:
    """
    Build the store endpoint with auth encoded as query parameters.

    Used by transports that cannot set request headers.

    Args:
        dsn: The DSN to authenticate with
        client: Client identifier, e.g. ``beacon-python/0.1.0``
    """
    return store_endpoint(dsn).copy_merge_params(_auth_params(dsn, client))


def auth_header(dsn: Dsn, client: str) -> dict[str, str]:
    """Build the auth header for requests to the store endpoint."""
    pairs = ", ".join(f"{key}={value}" for key, value in _auth_params(dsn, client).items())
    return {AUTH_HEADER: f"Sentry {pairs}"}
