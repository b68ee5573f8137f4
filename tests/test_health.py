import pytest

from influxdb2.models.health import HealthCheck, Status


def test_status_pass_is_parsed():
    check = HealthCheck.from_dict({"name": "influxdb", "status": "pass"})
    assert check.status == Status.PASS
    assert check.name == "influxdb"


def test_status_fail_is_parsed():
    check = HealthCheck.from_json('{"name": "influxdb", "status": "fail"}')
    assert check.status is Status.FAIL


def test_minimal_output_leaves_out_empty_and_none():
    check = HealthCheck("influxdb", Status.PASS)
    assert check.to_dict() == {"name": "influxdb", "status": "pass"}


def test_round_trip_with_nested_checks():
    data = {
        "name": "influxdb",
        "message": "ready for queries and writes",
        "checks": [{"name": "storage", "status": "fail", "message": "down"}],
        "status": "fail",
        "version": "2.6.0",
        "commit": "abc123",
    }
    check = HealthCheck.from_dict(data)
    assert check.checks[0] == HealthCheck("storage", Status.FAIL, message="down")
    assert check.to_dict() == data
    assert HealthCheck.from_json(check.to_json()) == check


def test_missing_status_is_an_error():
    with pytest.raises(ValueError):
        HealthCheck.from_dict({"name": "influxdb"})


def test_missing_name_is_an_error():
    with pytest.raises(ValueError):
        HealthCheck.from_dict({"status": "pass"})


def test_unknown_status_is_an_error():
    with pytest.raises(ValueError):
        HealthCheck.from_dict({"name": "influxdb", "status": "unknown"})