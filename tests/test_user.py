import pytest

from influxdb2.models.user import Status, User, UserLinks, Users, UsersLinks


def test_minimal_user():
    assert User("alice").to_dict() == {"name": "alice"}


def test_oauth_key():
    data = User("alice", oauth_id="x1").to_dict()
    assert data["oauthID"] == "x1"


def test_user_round_trip():
    user = User("alice", id="u1", status=Status.ACTIVE, links=UserLinks(self_="/u/u1"))
    data = user.to_dict()
    assert data["links"] == {"self": "/u/u1"}
    assert User.from_dict(data) == user


def test_missing_name_rejected():
    with pytest.raises(ValueError):
        User.from_dict({"id": "u1"})


def test_empty_users_writes_nothing():
    assert Users().to_dict() == {}
    assert Users.from_dict({}).users == []


def test_users_round_trip():
    users = Users(links=UsersLinks(self_="/users"), users=[User("a"), User("b")])
    assert Users.from_json(users.to_json()) == users