"""An unstructured composite resource."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from typing import Any

from unstructkit.objects import (
    Condition,
    GroupVersionKind,
    ObjectReference,
    SecretReference,
    UpdatePolicy,
    Unstructured,
)

Option = Callable[["Composite"], None]

_READ_ERRORS = (KeyError, TypeError, ValueError)
_EMPTY_REFERENCE = ObjectReference()


class Composite(Unstructured):
    """An unstructured composite resource."""

    def _get_reference(self, path: str) -> ObjectReference | None:
        try:
            return ObjectReference.from_dict(self._get_field(path))
        except _READ_ERRORS:
            return None

    def _set_value(self, path: str, value: Any) -> None:
        try:
            self._set_field(path, value)
        except TypeError:
            pass

    @property
    def composition_selector(self) -> dict[str, Any] | None:
        """The label selector used to pick a composition."""
        try:
            value = self._get_field("spec.compositionSelector")
        except _READ_ERRORS:
            return None
        if not isinstance(value, Mapping):
            return None
        return copy.deepcopy(dict(value))

    @composition_selector.setter
    def composition_selector(self, selector: Mapping[str, Any] | None) -> None:
        self._set_value(
            "spec.compositionSelector",
            None if selector is None else copy.deepcopy(dict(selector)),
        )

    @property
    def composition_reference(self) -> ObjectReference | None:
        return self._get_reference("spec.compositionRef")

    @composition_reference.setter
    def composition_reference(self, ref: ObjectReference | None) -> None:
        self._set_value("spec.compositionRef", None if ref is None else ref.to_dict())

    @property
    def composition_revision_reference(self) -> ObjectReference | None:
        return self._get_reference("spec.compositionRevisionRef")

    @composition_revision_reference.setter
    def composition_revision_reference(self, ref: ObjectReference | None) -> None:
        self._set_value("spec.compositionRevisionRef", None if ref is None else ref.to_dict())

    @property
    def composition_update_policy(self) -> UpdatePolicy | None:
        try:
            value = self._get_field("spec.compositionUpdatePolicy")
        except _READ_ERRORS:
            return None
        if not isinstance(value, str):
            return None
        try:
            return UpdatePolicy(value)
        except ValueError:
            return None

    @composition_update_policy.setter
    def composition_update_policy(self, policy: UpdatePolicy | None) -> None:
        self._set_value(
            "spec.compositionUpdatePolicy", None if policy is None else UpdatePolicy(policy).value
        )

    @property
    def claim_reference(self) -> ObjectReference | None:
        return self._get_reference("spec.claimRef")

    @claim_reference.setter
    def claim_reference(self, ref: ObjectReference | None) -> None:
        self._set_value("spec.claimRef", None if ref is None else ref.to_dict())

    @property
    def resource_references(self) -> list[ObjectReference]:
        """References to the composed resources; empty when unreadable."""
        try:
            raw = self._get_field("spec.resourceRefs")
        except _READ_ERRORS:
            return []
        if not isinstance(raw, list):
            return []
        try:
            return [ObjectReference.from_dict(item) for item in raw]
        except _READ_ERRORS:
            return []

    @resource_references.setter
    def resource_references(self, refs: Iterable[ObjectReference]) -> None:
        self._set_value(
            "spec.resourceRefs",
            [ref.to_dict() for ref in refs if ref != _EMPTY_REFERENCE],
        )

    @property
    def write_connection_secret_to_reference(self) -> SecretReference | None:
        try:
            return SecretReference.from_dict(self._get_field("spec.writeConnectionSecretToRef"))
        except _READ_ERRORS:
            return None

    @write_connection_secret_to_reference.setter
    def write_connection_secret_to_reference(self, ref: SecretReference | None) -> None:
        self._set_value("spec.writeConnectionSecretToRef", None if ref is None else ref.to_dict())

    @property
    def connection_details_last_published_time(self) -> datetime | None:
        return self._get_time("status.connectionDetails.lastPublishedTime")

    @connection_details_last_published_time.setter
    def connection_details_last_published_time(self, value: datetime | None) -> None:
        self._set_time("status.connectionDetails.lastPublishedTime", value)


def with_group_version_kind(gvk: GroupVersionKind) -> Option:
    """Return an option that sets the group, version and kind of a resource."""

    def apply(resource: Composite) -> None:
        resource.group_version_kind = gvk

    return apply


def with_conditions(*args: Condition) -> Option:
    """Return an option that sets the given conditions on a resource."""

    def apply(resource: Composite) -> None:
        resource.set_conditions(*args)

    return apply


def new(*args: Option) -> Composite:
    """Create an empty composite resource and apply the given options to it."""
    resource = Composite()
    for option in args:
        option(resource)
    return resource