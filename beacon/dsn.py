"""DSN parsing, validation and rendering for Beacon SDK."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from beacon.errors import (
    InvalidDsn,
    InvalidDsnFormat,
    InvalidPort,
    MissingComponent,
    UnsupportedProtocol,
)
from beacon.types import DsnComponents, DsnLike

# <protocol>://<user>[:<password>]@<host>[:<port>]/<path...>/<project_id>
_DSN_PATTERN = re.compile(
    r"(\w+)://(\w+)(?::(\w+))?@([\w.-]+)(?::(\d+))?/(.+)",
    re.ASCII,
)
_PORT_PATTERN = re.compile(r"[0-9]+")

SUPPORTED_PROTOCOLS = ("http", "https")
REQUIRED_COMPONENTS = ("protocol", "user", "host", "project_id")


@dataclass(frozen=True)
class Dsn:
    """
    A validated DSN, identifying an ingestion host and project.

    Instances are immutable and always valid: every construction path runs
    validation before the object is handed back. Prefer the factories
    ``Dsn.parse``, ``Dsn.from_string`` and ``Dsn.from_components`` over
    calling the constructor directly.

    The password (private key) is never included in ``repr()`` or ``str()``;
    use ``to_string(with_password=True)`` to render it.
    """

    protocol: str
    user: str
    host: str
    project_id: str
    password: str = field(default="", repr=False)
    port: str = ""
    path: str = ""

    def __post_init__(self) -> None:
        for name in REQUIRED_COMPONENTS:
            if not getattr(self, name):
                raise MissingComponent(name)

        if self.protocol not in SUPPORTED_PROTOCOLS:
            raise UnsupportedProtocol(self.protocol)

        if self.port and not (isinstance(self.port, str) and _PORT_PATTERN.fullmatch(self.port)):
            raise InvalidPort(self.port)

    @classmethod
    def parse(cls, value: DsnLike) -> Dsn:
        """
        Build a DSN from a string, a components mapping or another DSN.

        Args:
            value: The DSN string, a ``DsnComponents`` mapping, or a ``Dsn``

        Returns:
            The validated ``Dsn``

        Raises:
            InvalidDsn: If the value cannot be parsed or fails validation
        """
        if isinstance(value, Dsn):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        return cls.from_components(value)

    @classmethod
    def from_string(cls, dsn: str) -> Dsn:
        """
        Parse a DSN string.

        Format: <protocol>://<user>[:<password>]@<host>[:<port>]/[<path>/]<project_id>

        Example:
            >>> Dsn.from_string("https://public@sentry.example.com/123")
            Dsn(protocol='https', user='public', host='sentry.example.com', project_id='123', port='', path='')
        """
        match = _DSN_PATTERN.fullmatch(dsn)
        if not match:
            raise InvalidDsnFormat()

        protocol, user, password, host, port, rest = match.groups()

        path, _, project_id = rest.rpartition("/")

        return cls(
            protocol=protocol,
            user=user,
            password=password or "",
            host=host,
            port=port or "",
            path=path,
            project_id=project_id,
        )

    @classmethod
    def from_components(cls, components: DsnComponents | Mapping[str, str]) -> Dsn:
        """
        Build a DSN from discrete components.

        ``password``, ``port`` and ``path`` default to empty strings. A numeric
        ``port`` is converted to its string form. The
        components are taken as given: ``path`` is not split again and
        ``host`` is not checked against the string format.
        """
        return cls(
            protocol=components.get("protocol", ""),
            user=components.get("user", ""),
            password=components.get("password") or "",
            host=components.get("host", ""),
            port=str(components.get("port") or ""),
            path=components.get("path") or "",
            project_id=components.get("project_id", ""),
        )

    def to_string(self, with_password: bool = False) -> str:
        """
        Render the string representation of this DSN.

        By default this renders the public representation without the
        password. Set ``with_password`` to include it.
        """
        credentials = self.user
        if with_password and self.password:
            credentials += f":{self.password}"

        netloc = self.host
        if self.port:
            netloc += f":{self.port}"

        path = f"{self.path}/" if self.path else ""

        return f"{self.protocol}://{credentials}@{netloc}/{path}{self.project_id}"

    def to_components(self) -> DsnComponents:
        """Convert to a components mapping."""
        return {
            "protocol": self.protocol,
            "user": self.user,
            "password": self.password,
            "host": self.host,
            "port": self.port,
            "path": self.path,
            "project_id": self.project_id,
        }

    def __str__(self) -> str:
        return self.to_string()


def is_valid_dsn(value: DsnLike) -> bool:
    """Check if a DSN is valid without throwing."""
    try:
        Dsn.parse(value)
        return True
    except InvalidDsn:
        return False
