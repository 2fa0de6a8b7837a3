"""
Route record model.
"""
import enum
from typing import Any, Dict, Optional, Protocol, Union

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from netroutes.utils.netmask import DEFAULT_ROUTE, derive_route_name, normalize_default_netmask


class Absent(enum.Enum):
    """Marker for an optional field that was not provided at all."""
    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent.ABSENT


class RouteLike(Protocol):
    """Anything exposing the six route accessors can be formatted."""
    name: str
    network: Optional[str]
    netmask: Optional[str]
    gateway: Optional[str]
    interface: Optional[str]
    options: Union[str, Absent, None]


class RouteRecord(BaseModel):
    """One line of a routes file."""

    model_config = ConfigDict(frozen=True)

    name: str
    network: str
    netmask: Optional[str] = None
    gateway: Optional[str] = None
    interface: Optional[str] = None
    options: Union[str, Absent] = ABSENT

    @field_validator("options", mode="before")
    @classmethod
    def none_options_is_absent(cls, v):
        """Treat an unset options value as absent."""
        if v is None:
            return ABSENT
        return v

    @model_validator(mode="before")
    @classmethod
    def derive_missing_name(cls, data):
        """Fill in the name from network and netmask when it is not given."""
        if isinstance(data, dict) and data.get("name") is None:
            network, netmask = data.get("network"), data.get("netmask")
            if isinstance(network, str) and isinstance(netmask, str):
                data = {**data, "name": derive_route_name(network, netmask)}
        return data

    @model_validator(mode="after")
    def name_matches_network(self):
        """The name must be the one derived from network and netmask."""
        if self.netmask is not None:
            expected = derive_route_name(self.network, self.netmask)
            if self.name != expected:
                raise ValueError(f"route name {self.name!r} does not match {expected!r}")
        return self

    @classmethod
    def build(
        cls,
        network: str,
        netmask: str,
        gateway: str,
        interface: str,
        options: Union[str, Absent, None] = ABSENT,
    ) -> "RouteRecord":
        """
        Create a record, deriving its name from network and netmask.

        Default routes get their netmask normalized.

        Raises:
            ValueError: If the netmask cannot be converted to a prefix length
        """
        if network == DEFAULT_ROUTE:
            netmask = normalize_default_netmask(netmask)
        return cls(
            network=network,
            netmask=netmask,
            gateway=gateway,
            interface=interface,
            options=options,
        )

    @classmethod
    def from_route(cls, route: RouteLike) -> "RouteRecord":
        """
        Copy a route-like object into a record.

        The name is derived again whenever the route has a netmask.
        """
        return cls(
            name=route.name if route.netmask is None else None,
            network=route.network,
            netmask=route.netmask,
            gateway=route.gateway,
            interface=route.interface,
            options=getattr(route, "options", ABSENT),
        )

    @property
    def has_options(self) -> bool:
        return is_present(self.options)

    def to_dict(self) -> Dict[str, Any]:
        """Plain mapping of the record; options is left out when absent."""
        data = self.model_dump()
        if self.options is ABSENT:
            del data["options"]
        return data


def is_present(options: Union[str, Absent, None]) -> bool:
    """True when options carries text worth writing out."""
    return isinstance(options, str) and options != ""


def is_missing(value: Any) -> bool:
    """True for mandatory field values that cannot be written out."""
    if value is None or value is ABSENT:
        return True
    return isinstance(value, str) and not value.strip(" \t\f\v\r\n")
