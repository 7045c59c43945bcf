from datetime import datetime, timezone

import pytest

from unstructkit.composed import Composed, from_reference, new, with_conditions
from unstructkit.objects import Condition, ObjectReference, SecretReference

WHEN = datetime(2021, 6, 1, 12, 30, 45, tzinfo=timezone.utc)
READY = "Ready"
SYNCED = "Synced"


def available():
    return Condition(READY, "True", WHEN, "Available")


def creating():
    return Condition(READY, "False", WHEN, "Creating")


def reconcile_success():
    return Condition(SYNCED, "True", WHEN, "ReconcileSuccess")


def test_from_reference():
    ref = ObjectReference(api_version="a/v1", kind="k", namespace="ns", name="name")
    want = Composed(
        {
            "apiVersion": "a/v1",
            "kind": "k",
            "metadata": {"name": "name", "namespace": "ns"},
        }
    )
    assert new(from_reference(ref)) == want


@pytest.mark.parametrize(
    "resource, conditions, want",
    [
        pytest.param(lambda: new(), [available(), reconcile_success()], available(), id="NewCondition"),
        pytest.param(lambda: new(with_conditions(creating())), [available()], available(), id="ExistingCondition"),
        pytest.param(lambda: Composed({"status": "wat"}), [available()], Condition(), id="WeirdStatus"),
        pytest.param(
            lambda: Composed({"status": {"conditions": "wat"}}),
            [available()],
            available(),
            id="WeirdStatusConditions",
        ),
    ],
)
def test_conditions(resource, conditions, want):
    u = resource()
    u.set_conditions(*conditions)
    assert u.get_condition(READY) == want


def test_write_connection_secret_to_reference():
    ref = SecretReference(namespace="ns", name="cool")
    u = new()
    u.write_connection_secret_to_reference = ref
    assert u.write_connection_secret_to_reference == ref


def test_write_connection_secret_to_reference_unset():
    assert new().write_connection_secret_to_reference is None


def test_unstructured_shares_object():
    u = new()
    u.unstructured.name = "shared"
    assert u.name == "shared"