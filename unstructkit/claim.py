"""An unstructured composite resource claim."""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from unstructkit.objects import (
    Condition,
    GroupVersionKind,
    LocalSecretReference,
    ObjectReference,
    UpdatePolicy,
    Unstructured,
)

Option = Callable[["Claim"], None]

_READ_ERRORS = (KeyError, TypeError, ValueError)


class Claim(Unstructured):
    """An unstructured composite resource claim."""

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
    def resource_reference(self) -> ObjectReference | None:
        return self._get_reference("spec.resourceRef")

    @resource_reference.setter
    def resource_reference(self, ref: ObjectReference | None) -> None:
        self._set_value("spec.resourceRef", None if ref is None else ref.to_dict())

    @property
    def write_connection_secret_to_reference(self) -> LocalSecretReference | None:
        try:
            return LocalSecretReference.from_dict(
                self._get_field("spec.writeConnectionSecretToRef")
            )
        except _READ_ERRORS:
            return None

    @write_connection_secret_to_reference.setter
    def write_connection_secret_to_reference(self, ref: LocalSecretReference | None) -> None:
        self._set_value("spec.writeConnectionSecretToRef", None if ref is None else ref.to_dict())

    @property
    def connection_details_last_published_time(self) -> datetime | None:
        return self._get_time("status.connectionDetails.lastPublishedTime")

    @connection_details_last_published_time.setter
    def connection_details_last_published_time(self, value: datetime | None) -> None:
        self._set_time("status.connectionDetails.lastPublishedTime", value)


def with_group_version_kind(gvk: GroupVersionKind) -> Option:
    """Return an option that sets the group, version and kind of a claim."""

    def apply(claim: Claim) -> None:
        claim.group_version_kind = gvk

    return apply


def with_conditions(*args: Condition) -> Option:
    """Return an option that sets the given conditions on a claim."""

    def apply(claim: Claim) -> None:
        claim.set_conditions(*args)

    return apply


def new(*args: Option) -> Claim:
    """Create an empty claim and apply the given options to it."""
    claim = Claim()
    for option in args:
        option(claim)
    return claim