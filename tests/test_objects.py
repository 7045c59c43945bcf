from datetime import datetime, timezone

import pytest

from unstructkit.objects import (
    Condition,
    GroupVersionKind,
    LocalSecretReference,
    ObjectReference,
    SecretReference,
    Unstructured,
    UnstructuredList,
    UpdatePolicy,
)

WHEN = datetime(2021, 6, 1, 12, 30, 45, tzinfo=timezone.utc)


def test_api_version_with_group():
    assert GroupVersionKind("g", "v1", "k").api_version == "g/v1"


def test_api_version_without_group():
    assert GroupVersionKind(version="v1", kind="k").api_version == "v1"


def test_object_reference_to_dict_omits_empty_fields():
    ref = ObjectReference(namespace="ns", name="cool")
    assert ref.to_dict() == {"namespace": "ns", "name": "cool"}


def test_object_reference_round_trip():
    ref = ObjectReference(kind="k", namespace="ns", name="n", uid="u", api_version="a/v1")
    assert ObjectReference.from_dict(ref.to_dict()) == ref


def test_object_reference_group_version_kind():
    ref = ObjectReference(api_version="a/v1", kind="k")
    assert ref.group_version_kind == GroupVersionKind("a", "v1", "k")


def test_object_reference_from_non_mapping_fails():
    with pytest.raises(TypeError):
        ObjectReference.from_dict("wat")


def test_object_reference_from_bad_field_fails():
    with pytest.raises(TypeError):
        ObjectReference.from_dict({"name": 3})


def test_secret_reference_round_trip():
    ref = SecretReference(name="cool", namespace="ns")
    assert SecretReference.from_dict(ref.to_dict()) == ref


def test_local_secret_reference_round_trip():
    ref = LocalSecretReference(name="cool")
    assert LocalSecretReference.from_dict(ref.to_dict()) == ref


def test_update_policy_from_value():
    assert UpdatePolicy("Manual") is UpdatePolicy.MANUAL


def test_condition_round_trip_drops_sub_second_resolution():
    cond = Condition("Ready", "True", WHEN.replace(microsecond=123456), "Available")
    assert Condition.from_dict(cond.to_dict()) == Condition("Ready", "True", WHEN, "Available")


def test_condition_time_format():
    assert Condition("Ready", "True", WHEN).to_dict()["lastTransitionTime"] == "2021-06-01T12:30:45Z"


def test_condition_without_message_or_time():
    data = Condition("Ready", "True").to_dict()
    assert "message" not in data
    assert data["lastTransitionTime"] is None


def test_group_version_kind_sets_object():
    u = Unstructured()
    u.group_version_kind = GroupVersionKind("g", "v1", "k")
    assert u.object == {"apiVersion": "g/v1", "kind": "k"}
    assert u.group_version_kind == GroupVersionKind("g", "v1", "k")


def test_metadata_setters_and_removal():
    u = Unstructured()
    u.name = "name"
    u.namespace = "ns"
    u.uid = ""
    assert u.object == {"metadata": {"name": "name", "namespace": "ns"}}
    u.name = ""
    assert u.name == ""
    assert u.object == {"metadata": {"namespace": "ns"}}


def test_get_condition_without_status_is_empty():
    assert Unstructured().get_condition("Ready") == Condition()


def test_get_condition_missing_type_is_unknown():
    u = Unstructured()
    u.set_conditions(Condition("Synced", "True", WHEN))
    assert u.get_condition("Ready") == Condition(type="Ready", status="Unknown")


def test_set_conditions_replaces_and_appends():
    u = Unstructured()
    u.set_conditions(Condition("Ready", "False", WHEN, "Creating"))
    u.set_conditions(Condition("Ready", "True", WHEN, "Available"), Condition("Synced", "True", WHEN))
    assert u.get_condition("Ready") == Condition("Ready", "True", WHEN, "Available")
    assert u.get_condition("Synced") == Condition("Synced", "True", WHEN)
    assert len(u.object["status"]["conditions"]) == 2


def test_set_equivalent_condition_keeps_original_time():
    u = Unstructured()
    u.set_conditions(Condition("Ready", "True", WHEN, "Available"))
    u.set_conditions(Condition("Ready", "True", WHEN.replace(year=2022), "Available"))
    assert u.get_condition("Ready").last_transition_time == WHEN


def test_unstructured_is_its_own_unstructured():
    u = Unstructured({"kind": "k"})
    assert u.unstructured is u


def test_list_is_its_own_unstructured_list():
    lst = UnstructuredList([Unstructured()])
    assert lst.unstructured_list is lst