"""Unstructured objects and the typed values stored inside them."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _format_time(value: datetime) -> str:
    return value.astimezone(timezone.utc).strftime(_TIME_FORMAT)


def _parse_time(text: Any) -> datetime:
    if not isinstance(text, str):
        raise TypeError(f"timestamp must be a string, not {type(text).__name__}")
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"{what} must be an object, not {type(data).__name__}")
    return data


def _string(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, not {type(value).__name__}")
    return value


def _split_api_version(api_version: str) -> tuple[str, str]:
    """Split an apiVersion into its group and version."""
    if not api_version:
        return "", ""
    parts = api_version.split("/")
    if len(parts) == 1:
        return "", parts[0]
    if len(parts) == 2:
        return parts[0], parts[1]
    raise ValueError(f"unexpected apiVersion {api_version!r}")


@dataclass(frozen=True)
class GroupVersionKind:
    """The group, version and kind that identify a type of object."""

    group: str = ""
    version: str = ""
    kind: str = ""

    @property
    def api_version(self) -> str:
        """The apiVersion string: 'group/version', or just the version."""
        return f"{self.group}/{self.version}" if self.group else self.version


_REFERENCE_KEYS = (
    ("kind", "kind"),
    ("namespace", "namespace"),
    ("name", "name"),
    ("uid", "uid"),
    ("api_version", "apiVersion"),
    ("resource_version", "resourceVersion"),
    ("field_path", "fieldPath"),
)


@dataclass(frozen=True)
class ObjectReference:
    """A reference to another object."""

    kind: str = ""
    namespace: str = ""
    name: str = ""
    uid: str = ""
    api_version: str = ""
    resource_version: str = ""
    field_path: str = ""

    def to_dict(self) -> dict[str, str]:
        """Serialise, leaving out empty fields."""
        return {key: getattr(self, attr) for attr, key in _REFERENCE_KEYS if getattr(self, attr)}

    @classmethod
    def from_dict(cls, data: Any) -> ObjectReference:
        data = _require_mapping(data, "object reference")
        return cls(**{attr: _string(data, key) for attr, key in _REFERENCE_KEYS})

    @property
    def group_version_kind(self) -> GroupVersionKind:
        try:
            group, version = _split_api_version(self.api_version)
        except ValueError:
            return GroupVersionKind(kind=self.kind)
        return GroupVersionKind(group, version, self.kind)


@dataclass(frozen=True)
class SecretReference:
    """A reference to a secret in a given namespace."""

    name: str = ""
    namespace: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "namespace": self.namespace}

    @classmethod
    def from_dict(cls, data: Any) -> SecretReference:
        data = _require_mapping(data, "secret reference")
        return cls(name=_string(data, "name"), namespace=_string(data, "namespace"))


@dataclass(frozen=True)
class LocalSecretReference:
    """A reference to a secret in the referrer's own namespace."""

    name: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name}

    @classmethod
    def from_dict(cls, data: Any) -> LocalSecretReference:
        data = _require_mapping(data, "secret reference")
        return cls(name=_string(data, "name"))


class UpdatePolicy(str, enum.Enum):
    """How updates to a composition are taken up."""

    AUTOMATIC = "Automatic"
    MANUAL = "Manual"


@dataclass(frozen=True)
class Condition:
    """An observed condition of an object."""

    type: str = ""
    status: str = ""
    last_transition_time: datetime | None = None
    reason: str = ""
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": self.type,
            "status": self.status,
            "lastTransitionTime": (
                _format_time(self.last_transition_time) if self.last_transition_time else None
            ),
            "reason": self.reason,
        }
        if self.message:
            data["message"] = self.message
        return data

    @classmethod
    def from_dict(cls, data: Any) -> Condition:
        data = _require_mapping(data, "condition")
        raw_time = data.get("lastTransitionTime")
        return cls(
            type=_string(data, "type"),
            status=_string(data, "status"),
            last_transition_time=None if raw_time is None else _parse_time(raw_time),
            reason=_string(data, "reason"),
            message=_string(data, "message"),
        )

    def _equivalent(self, other: Condition) -> bool:
        return (self.type, self.status, self.reason, self.message) == (
            other.type,
            other.status,
            other.reason,
            other.message,
        )


def _conditions_from_status(status: Any) -> list[Condition]:
    status = _require_mapping(status, "status")
    raw = status.get("conditions")
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise TypeError(f"conditions must be a list, not {type(raw).__name__}")
    return [Condition.from_dict(item) for item in raw]


def _merge_conditions(existing: list[Condition], updates: tuple[Condition, ...]) -> list[Condition]:
    merged = list(existing)
    for new in updates:
        found = False
        for position, current in enumerate(merged):
            if current.type != new.type:
                continue
            found = True
            if not current._equivalent(new):
                merged[position] = new
        if not found:
            merged.append(new)
    return merged


@dataclass
class Unstructured:
    """An object held as nested dictionaries."""

    object: dict[str, Any] = field(default_factory=dict)

    @property
    def unstructured(self) -> Unstructured:
        """The underlying unstructured object, which is this object itself."""
        return self

    # Field-path access -------------------------------------------------

    def _get_field(self, path: str) -> Any:
        current: Any = self.object
        for segment in path.split("."):
            if not isinstance(current, dict):
                raise TypeError(f"{path}: cannot descend into {type(current).__name__}")
            if segment not in current:
                raise KeyError(path)
            current = current[segment]
        return current

    def _set_field(self, path: str, value: Any) -> None:
        *parents, last = path.split(".")
        current: Any = self.object
        for segment in parents:
            child = current.get(segment)
            if child is None:
                child = current[segment] = {}
            elif not isinstance(child, dict):
                raise TypeError(f"{path}: {segment} is not an object")
            current = child
        current[last] = value

    def _remove_field(self, path: str) -> None:
        *parents, last = path.split(".")
        current: Any = self.object
        for segment in parents:
            current = current.get(segment) if isinstance(current, dict) else None
            if current is None:
                return
        if isinstance(current, dict):
            current.pop(last, None)

    def _get_time(self, path: str) -> datetime | None:
        try:
            return _parse_time(self._get_field(path))
        except (KeyError, TypeError, ValueError):
            return None

    def _set_time(self, path: str, value: datetime | None) -> None:
        try:
            self._set_field(path, None if value is None else _format_time(value))
        except TypeError:
            pass

    # Metadata ----------------------------------------------------------

    def _metadata(self, key: str) -> str:
        try:
            value = self._get_field(f"metadata.{key}")
        except (KeyError, TypeError):
            return ""
        return value if isinstance(value, str) else ""

    def _set_metadata(self, key: str, value: str) -> None:
        if not value:
            self._remove_field(f"metadata.{key}")
            return
        try:
            self._set_field(f"metadata.{key}", value)
        except TypeError:
            pass

    @property
    def group_version_kind(self) -> GroupVersionKind:
        api_version = self.object.get("apiVersion")
        kind = self.object.get("kind")
        kind = kind if isinstance(kind, str) else ""
        try:
            group, version = _split_api_version(api_version if isinstance(api_version, str) else "")
        except ValueError:
            return GroupVersionKind(kind=kind)
        return GroupVersionKind(group, version, kind)

    @group_version_kind.setter
    def group_version_kind(self, gvk: GroupVersionKind) -> None:
        self.object["apiVersion"] = gvk.api_version
        self.object["kind"] = gvk.kind

    @property
    def name(self) -> str:
        return self._metadata("name")

    @name.setter
    def name(self, value: str) -> None:
        self._set_metadata("name", value)

    @property
    def namespace(self) -> str:
        return self._metadata("namespace")

    @namespace.setter
    def namespace(self, value: str) -> None:
        self._set_metadata("namespace", value)

    @property
    def uid(self) -> str:
        return self._metadata("uid")

    @uid.setter
    def uid(self, value: str) -> None:
        self._set_metadata("uid", value)

    # Conditions --------------------------------------------------------

    def get_condition(self, condition_type: str) -> Condition:
        """Return the condition of the given type.

        An empty Condition comes back when the status cannot be read, and an
        Unknown one when the status holds no condition of that type.
        """
        try:
            conditions = _conditions_from_status(self._get_field("status"))
        except (KeyError, TypeError, ValueError):
            return Condition()
        for condition in conditions:
            if condition.type == condition_type:
                return condition
        return Condition(type=condition_type, status="Unknown")

    def set_conditions(self, *args: Condition) -> None:
        """Set the given conditions, replacing any of the same type."""
        try:
            existing = _conditions_from_status(self._get_field("status"))
        except (KeyError, TypeError, ValueError):
            existing = []
        merged = _merge_conditions(existing, args)
        try:
            self._set_field("status.conditions", [c.to_dict() for c in merged])
        except TypeError:
            pass


@dataclass
class UnstructuredList:
    """A list of unstructured objects."""

    items: list[Unstructured] = field(default_factory=list)
    object: dict[str, Any] = field(default_factory=dict)

    @property
    def unstructured_list(self) -> UnstructuredList:
        """The underlying unstructured list, which is this list itself."""
        return self