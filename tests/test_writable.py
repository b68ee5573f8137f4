import pytest

from influxdb2.writable import (
    Unsigned,
    encode_fields,
    encode_key,
    encode_tags,
    encode_timestamp,
    encode_value,
)


def test_value_writable_f64():
    assert encode_value(33.33) == "33.33"


def test_value_writable_i64():
    assert encode_value(33) == "33i"


def test_tags_tuple():
    assert encode_tags(("33", "str")) == "33=str"
    assert encode_tags(("ff", "aa", "bb", "cc")) == "ff=aa,bb=cc"


def test_fields_tuple():
    assert encode_fields(("ddf", Unsigned(33))) == "ddf=33u"
    assert encode_fields(("ddf", Unsigned(33), "gg", True)) == "ddf=33u,gg=t"
    assert (
        encode_fields(("ddf", Unsigned(33), "gg", True, "cc", 44.44, "dd", 22))
        == "ddf=33u,gg=t,cc=44.44,dd=22i"
    )


def test_fields_from_mapping():
    assert encode_fields({"a": 1, "b": "x"}) == 'a=1i,b="x"'


@pytest.mark.parametrize(
    "value, expected",
    [
        (42.0, "42"),
        (-0.0, "-0"),
        (1e20, "100000000000000000000"),
        (1e-7, "0.0000001"),
        (False, "f"),
        (True, "t"),
        ("hello", '"hello"'),
        (None, '"None"'),
        (Unsigned(7), "7u"),
        (-5, "-5i"),
    ],
)
def test_encode_value(value, expected):
    assert encode_value(value) == expected


def test_encode_value_rejects_unknown_type():
    with pytest.raises(TypeError):
        encode_value([1])


def test_encode_value_rejects_out_of_range_int():
    with pytest.raises(ValueError):
        encode_value(2**63)


def test_unsigned_rejects_negative():
    with pytest.raises(ValueError):
        Unsigned(-1)


def test_unsigned_str():
    assert str(Unsigned(12)) == "12"


def test_encode_key():
    assert encode_key("abc") == "abc"
    assert encode_key(Unsigned(5)) == "5"
    assert encode_key(None) == "None"


def test_encode_key_rejects_bool():
    with pytest.raises(TypeError):
        encode_key(True)


def test_encode_tags_odd_items():
    with pytest.raises(ValueError):
        encode_tags(("a", "b", "c"))


def test_encode_tags_too_many_pairs():
    with pytest.raises(ValueError):
        encode_tags(("a", "1", "b", "2", "c", "3", "d", "4"))


def test_encode_fields_empty():
    with pytest.raises(ValueError):
        encode_fields(())


def test_encode_tags_rejects_string():
    with pytest.raises(TypeError):
        encode_tags("ab")


def test_encode_timestamp():
    assert encode_timestamp(1465839830100400200) == "1465839830100400200"
    assert encode_timestamp(-3) == "-3"


def test_encode_timestamp_rejects_float():
    with pytest.raises(TypeError):
        encode_timestamp(1.5)