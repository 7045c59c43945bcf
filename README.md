# unstructkit

Typed helpers over plain-dictionary Kubernetes-style objects: composite
resources, composite resource claims and composed resources.

Each object keeps its content as an ordinary nested `dict` in its `object`
attribute; the helpers read and write the well-known fields under
`metadata`, `spec` and `status` of that dictionary.

## Installation

```
pip install unstructkit
```

## Modules

- `unstructkit.objects` – the base `Unstructured` object and `UnstructuredList`,
  plus the typed values stored in them: `GroupVersionKind`, `ObjectReference`,
  `SecretReference`, `LocalSecretReference`, `UpdatePolicy` and `Condition`.
- `unstructkit.composite` – `Composite`, with `new`, `with_group_version_kind`
  and `with_conditions`.
- `unstructkit.claim` – `Claim`, with `new`, `with_group_version_kind` and
  `with_conditions`.
- `unstructkit.composed` – `Composed`, with `new`, `from_reference` and
  `with_conditions`.

## Composite resources

```python
from unstructkit import composite
from unstructkit.objects import (
    GroupVersionKind, ObjectReference, SecretReference, UpdatePolicy,
)

xr = composite.new(composite.with_group_version_kind(GroupVersionKind("g", "v1", "k")))
xr.composition_reference = ObjectReference(namespace="ns", name="cool")
xr.composition_update_policy = UpdatePolicy.MANUAL
xr.resource_references = [ObjectReference(namespace="ns", name="db")]
xr.write_connection_secret_to_reference = SecretReference(namespace="ns", name="conn")

print(xr.object["apiVersion"])          # "g/v1"
print(xr.composition_reference.name)    # "cool"
```

`Composite` has these properties, each readable and settable:
`composition_selector` (a label-selector dictionary),
`composition_reference`, `composition_revision_reference`,
`composition_update_policy`, `claim_reference`, `resource_references`,
`write_connection_secret_to_reference` and
`connection_details_last_published_time` (a `datetime`).

When `resource_references` is set, references whose fields are all empty are
dropped. Reading it gives an empty list when the field is missing or
malformed.

## Claims

```python
from unstructkit import claim
from unstructkit.objects import GroupVersionKind, LocalSecretReference

c = claim.new(claim.with_group_version_kind(GroupVersionKind("g", "v1", "k")))
c.write_connection_secret_to_reference = LocalSecretReference(name="conn")
```

`Claim` offers the same composition properties as `Composite`, plus
`resource_reference`, a `write_connection_secret_to_reference` that holds a
namespace-local `LocalSecretReference`, and
`connection_details_last_published_time`.

## Composed resources

```python
from unstructkit import composed
from unstructkit.objects import ObjectReference

cd = composed.new(composed.from_reference(
    ObjectReference(api_version="a/v1", kind="k", namespace="ns", name="name")
))
print(cd.object)
# {'apiVersion': 'a/v1', 'kind': 'k', 'metadata': {'name': 'name', 'namespace': 'ns'}}
```

`from_reference` copies the group, version, kind, name, namespace and uid of
the reference; empty metadata values are left out. `Composed` has a
`write_connection_secret_to_reference` property holding a `SecretReference`.

## Reading and writing fields

A property returns `None` (or an empty list, for `resource_references`) when
its field is missing or malformed. Setting a property to `None` stores a null
value in the field. A write is silently skipped when a parent on the path,
such as `status`, is present but is not an object.

Timestamps are stored as UTC strings at one-second resolution
(`2024-01-02T03:04:05Z`), so a `datetime` read back loses its sub-second part.

Every object also has `group_version_kind`, `name`, `namespace` and `uid`
properties, and an `unstructured` property that returns the object itself.
`UnstructuredList` holds `items` and has an `unstructured_list` property that
returns the list itself.

## Conditions

Every object carries status conditions. Setting a condition replaces any
existing condition of the same type; new types are appended:

```python
from unstructkit.objects import Condition

xr.set_conditions(Condition(type="Ready", status="True", reason="Available"))
ready = xr.get_condition("Ready")
```

`get_condition` returns a condition of the requested type with status
`"Unknown"` when none of that type is set, and an empty `Condition` when
`status` is missing or is not an object. A `status.conditions` value that is
not a list is overwritten by `set_conditions`.

## What this package does not do

It only builds and inspects objects in memory. It has no client: it does not
talk to a cluster or any API server, and nothing here fetches, stores or
updates objects remotely.

## Running the tests

```
pip install -e ".[test]"
pytest
```