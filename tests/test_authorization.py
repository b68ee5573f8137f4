import pytest

from influxdb2.models.authorization import Authorization, AuthorizationAllOfLinks, Status
from influxdb2.models.permission import Action, Permission
from influxdb2.models.resource import Resource, ResourceType


def _permission():
    return Permission(Action.READ, Resource(ResourceType.BUCKETS))


def test_minimal_keys():
    auth = Authorization("org1", [_permission()])
    data = auth.to_dict()
    assert set(data) == {"orgID", "permissions"}
    assert data["orgID"] == "org1"


def test_full_round_trip():
    auth = Authorization(
        "org1",
        [_permission()],
        status=Status.ACTIVE,
        description="reader",
        created_at="2023-01-01T00:00:00Z",
        id="a1",
        token="token",
        user_id="u1",
        user="alice",
        org="acme",
        links=AuthorizationAllOfLinks(self_="/api/v2/authorizations/a1", user="/u/u1"),
    )
    data = auth.to_dict()
    assert data["userID"] == "u1"
    assert data["links"]["self"] == "/api/v2/authorizations/a1"
    assert data["createdAt"] == "2023-01-01T00:00:00Z"
    assert Authorization.from_json(auth.to_json()) == auth


def test_status_variant():
    assert Status("inactive") is Status.INACTIVE


def test_missing_org_rejected():
    with pytest.raises(ValueError):
        Authorization.from_dict({"permissions": []})


def test_missing_permissions_rejected():
    with pytest.raises(ValueError):
        Authorization.from_dict({"orgID": "org1"})


def test_empty_links_write_nothing():
    assert AuthorizationAllOfLinks().to_dict() == {}