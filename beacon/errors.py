"""Errors raised by Beacon SDK."""


class BeaconError(Exception):
    """Base class for all Beacon SDK errors."""


class InvalidDsn(BeaconError, ValueError):
    """A DSN could not be parsed or failed validation."""


class InvalidDsnFormat(InvalidDsn):
    """The DSN string does not match the expected format."""

    def __init__(self) -> None:
        super().__init__("Invalid DSN")


class MissingComponent(InvalidDsn):
    """A mandatory DSN component is empty."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Invalid DSN: Missing {field}")


class UnsupportedProtocol(InvalidDsn):
    """The DSN protocol is neither http nor https."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f'Invalid DSN: Unsupported protocol "{value}"')


class InvalidPort(InvalidDsn):
    """The DSN port is not a base-10 integer."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f'Invalid DSN: Invalid port number "{value}"')
