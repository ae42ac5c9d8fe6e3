"""Type definitions for Beacon SDK."""

from typing import TYPE_CHECKING, Literal, TypedDict, Union

if TYPE_CHECKING:
    from beacon.dsn import Dsn

DsnProtocol = Literal["http", "https"]


class DsnComponents(TypedDict, total=False):
    """Discrete DSN fields, as accepted by ``Dsn.from_components``."""

    protocol: str
    user: str
    password: str
    host: str
    port: str
    path: str
    project_id: str


DsnLike = Union[str, DsnComponents, "Dsn"]
