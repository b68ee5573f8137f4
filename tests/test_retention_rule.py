import pytest

from influxdb2.models.retention_rule import RetentionRule, RetentionType


def test_wire_form():
    rule = RetentionRule(RetentionType.EXPIRE, 3600)
    assert rule.to_dict() == {"type": "expire", "everySeconds": 3600}


def test_round_trip_with_shard_duration():
    rule = RetentionRule(RetentionType.EXPIRE, 0, shard_group_duration_seconds=86400)
    assert RetentionRule.from_json(rule.to_json()) == rule


def test_unknown_type_rejected():
    with pytest.raises(ValueError):
        RetentionRule.from_dict({"type": "keep", "everySeconds": 1})


def test_missing_every_seconds_rejected():
    with pytest.raises(ValueError):
        RetentionRule.from_dict({"type": RetentionType.EXPIRE.value})


def test_non_integer_every_seconds_rejected():
    with pytest.raises(TypeError):
        RetentionRule.from_dict({"type": RetentionType.EXPIRE.value, "everySeconds": "1"})