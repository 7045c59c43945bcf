"""An unstructured composed resource."""

from __future__ import annotations

from collections.abc import Callable

from unstructkit.objects import Condition, ObjectReference, SecretReference, Unstructured

Option = Callable[["Composed"], None]


class Composed(Unstructured):
    """An unstructured composed resource."""

    @property
    def write_connection_secret_to_reference(self) -> SecretReference | None:
        try:
            return SecretReference.from_dict(self._get_field("spec.writeConnectionSecretToRef"))
        except (KeyError, TypeError, ValueError):
            return None

    @write_connection_secret_to_reference.setter
    def write_connection_secret_to_reference(self, ref: SecretReference | None) -> None:
        try:
            self._set_field("spec.writeConnectionSecretToRef", None if ref is None else ref.to_dict())
        except TypeError:
            pass


def from_reference(ref: ObjectReference) -> Option:
    """Return an option that copies the reference's identity onto a resource."""

    def apply(resource: Composed) -> None:
        resource.group_version_kind = ref.group_version_kind
        resource.name = ref.name
        resource.namespace = ref.namespace
        resource.uid = ref.uid

    return apply


def with_conditions(*args: Condition) -> Option:
    """Return an option that sets the given conditions on a resource."""

    def apply(resource: Composed) -> None:
        resource.set_conditions(*args)

    return apply


def new(*args: Option) -> Composed:
    """Create an empty composed resource and apply the given options to it."""
    resource = Composed()
    for option in args:
        option(resource)
    return resource