import pytest

from influxdb2.models.resource import Resource, ResourceType


def test_minimal_wire_form():
    assert Resource(ResourceType.BUCKETS).to_dict() == {"type": "buckets"}


def test_camel_case_variant():
    assert ResourceType("notificationEndpoints") is ResourceType.NOTIFICATION_ENDPOINTS


def test_round_trip_with_org():
    resource = Resource(ResourceType.TASKS, id="t1", name="job", org_id="o1", org="acme")
    data = resource.to_dict()
    assert data["orgID"] == "o1"
    assert Resource.from_dict(data) == resource


@pytest.mark.parametrize("kind", list(ResourceType))
def test_every_type_round_trips(kind):
    resource = Resource(kind)
    assert Resource.from_json(resource.to_json()).type is kind


def test_unknown_type_rejected():
    with pytest.raises(ValueError):
        Resource.from_dict({"type": "nothing"})


def test_missing_type_rejected():
    with pytest.raises(ValueError):
        Resource.from_dict({"id": "x"})