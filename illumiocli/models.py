"""Resource models exchanged with the policy compute engine API."""

import types
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Mapping, Union, get_args, get_origin


def _field_types(cls: type) -> dict[str, Any]:
    return {f.name: f.type for f in fields(cls)}


def _optional_inner(hint: Any) -> Any:
    """Return the wrapped type of an optional hint, or None if it is not optional."""
    if get_origin(hint) in (Union, types.UnionType) and type(None) in get_args(hint):
        return next(arg for arg in get_args(hint) if arg is not type(None))
    return None


def _convert(hint: Any, value: Any) -> Any:
    inner = _optional_inner(hint)
    if inner is not None:
        return None if value is None else _convert(inner, value)
    if get_origin(hint) is list:
        (item,) = get_args(hint)
        return [_convert(item, entry) for entry in value or []]
    if is_dataclass(hint):
        return hint.from_dict(value or {})
    return hint() if value is None else value


def _load(cls: type, data: Mapping[str, Any]) -> Any:
    hints = _field_types(cls)
    return cls(**{name: _convert(hint, data.get(name)) for name, hint in hints.items()})


def _plain(value: Any) -> Any:
    if is_dataclass(value):
        return value.to_dict()
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


def _dump(obj: Any, omit_empty: bool = True) -> dict[str, Any]:
    """Serialise a model; empty values are left out unless omit_empty is false.

    Optional fields are left out only when None; nested objects are always sent.
    """
    hints = _field_types(type(obj))
    result: dict[str, Any] = {}
    for name, hint in hints.items():
        value = getattr(obj, name)
        data = _plain(value)
        if omit_empty:
            if _optional_inner(hint) is not None:
                if value is None:
                    continue
            elif not (data or isinstance(data, dict)):
                continue
        result[name] = data
    return result


@dataclass
class ClusterError:
    """An error reported by a container cluster."""

    error_type: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ClusterError":
        return _load(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _dump(self, omit_empty=False)


@dataclass
class Node:
    """A node of a container cluster."""

    name: str = ""
    pod_subnet: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Node":
        return _load(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _dump(self, omit_empty=False)


@dataclass
class ContainerCluster:
    """A container cluster registered with the engine."""

    href: str = ""
    pce_fqdn: str | None = None
    name: str = ""
    description: str = ""
    manager_type: str = ""
    network_type: str = ""
    last_connected: str = ""
    kubelink_version: str = ""
    clas_mode: bool = False
    cluster_mode: str = ""
    online: bool = False
    nodes: list[Node] = field(default_factory=list)
    container_runtime: str | None = None
    errors: list[ClusterError] = field(default_factory=list)
    caps: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ContainerCluster":
        return _load(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _dump(self, omit_empty=False)


@dataclass
class Href:
    """A reference to another resource."""

    href: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Href":
        return _load(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _dump(self)


@dataclass
class ContainerWorkloadProfileLabelAssignment:
    """The label a profile assigns for one key."""

    href: str = ""
    value: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ContainerWorkloadProfileLabelAssignment":
        return _load(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _dump(self)


@dataclass
class ContainerWorkloadProfileLabel:
    """A label key of a container workload profile with its assignment."""

    key: str = ""
    assignment: ContainerWorkloadProfileLabelAssignment = field(
        default_factory=ContainerWorkloadProfileLabelAssignment
    )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ContainerWorkloadProfileLabel":
        return _load(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _dump(self)


@dataclass
class ContainerWorkloadProfile:
    """Policy settings for one namespace of a container cluster."""

    href: str = ""
    namespace: str = ""
    description: str = ""
    enforcement_mode: str = ""
    visibility_level: str = ""
    managed: bool = False
    assign_labels: list[Href] = field(default_factory=list)
    labels: list[ContainerWorkloadProfileLabel] = field(default_factory=list)
    linked: bool = False
    created_at: str = ""
    created_by: Href | None = None
    updated_at: str = ""
    updated_by: Href | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ContainerWorkloadProfile":
        return _load(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _dump(self)


@dataclass
class VirtualServiceServicePort:
    """A port and protocol number served by a virtual service."""

    port: int = 0
    proto: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VirtualServiceServicePort":
        return _load(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _dump(self)


@dataclass
class VirtualServiceLabel:
    """A label attached to a virtual service."""

    href: str = ""
    key: str = ""
    value: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VirtualServiceLabel":
        return _load(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _dump(self)


@dataclass
class VirtualServiceServiceAddress:
    """An address at which a virtual service is reachable."""

    fqdn: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VirtualServiceServiceAddress":
        return _load(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _dump(self)


@dataclass
class VirtualService:
    """A virtual service of the security policy."""

    href: str = ""
    created_at: str = ""
    updated_at: str = ""
    deleted_at: str = ""
    created_by: Href = field(default_factory=Href)
    updated_by: Href = field(default_factory=Href)
    deleted_by: Href = field(default_factory=Href)
    update_type: str = ""
    name: str = ""
    description: str = ""
    external_data_set: str = ""
    external_data_reference: str = ""
    pce_fqdn: str | None = None
    service_ports: list[VirtualServiceServicePort] = field(default_factory=list)
    labels: list[VirtualServiceLabel] = field(default_factory=list)
    ip_overrides: list[str] = field(default_factory=list)
    apply_to: str = ""
    caps: list[str] = field(default_factory=list)
    service_addresses: list[VirtualServiceServiceAddress] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VirtualService":
        return _load(cls, data)

    def to_dict(self) -> dict[str, Any]:
        return _dump(self)