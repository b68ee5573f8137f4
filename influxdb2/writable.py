"""Encoding of values, keys, tags, fields and timestamps for line protocol."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U64_MAX = 2**64 - 1

_MAX_TAG_PAIRS = 3
_MAX_FIELD_PAIRS = 7


class Unsigned(int):
    """A non-negative 64-bit integer, encoded with the ``u`` suffix."""

    def __new__(cls, value: Any = 0) -> "Unsigned":
        number = super().__new__(cls, value)
        if not 0 <= number <= _U64_MAX:
            raise ValueError(f"unsigned value out of range: {int(number)}")
        return number

    def __repr__(self) -> str:
        return f"Unsigned({int.__repr__(self)})"

    def __str__(self) -> str:
        return int.__repr__(self)


def _format_float(value: float) -> str:
    """Format a float the way line protocol expects: shortest form, no exponent."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def encode_value(value: Any) -> str:
    """Encode a field value: float, signed int, Unsigned, str, bool or None."""
    if value is None:
        return '"None"'
    if isinstance(value, bool):
        return "t" if value else "f"
    if isinstance(value, Unsigned):
        return f"{int(value)}u"
    if isinstance(value, int):
        if not _I64_MIN <= value <= _I64_MAX:
            raise ValueError(f"integer value out of range: {value}")
        return f"{int(value)}i"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return f'"{value}"'
    raise TypeError(f"unsupported value type: {type(value).__name__}")


def encode_key(key: Any) -> str:
    """Encode a tag key, tag value or field key: str, unsigned int or None."""
    if key is None:
        return "None"
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        raise TypeError("bool is not a valid key")
    if isinstance(key, int):
        if not 0 <= key <= _U64_MAX:
            raise ValueError(f"key out of unsigned range: {key}")
        return str(int(key))
    raise TypeError(f"unsupported key type: {type(key).__name__}")


def _pairs(items: Any, max_pairs: int, what: str) -> list[tuple[Any, Any]]:
    if isinstance(items, (str, bytes)):
        raise TypeError(f"{what} must be a mapping or a flat sequence of pairs")
    if isinstance(items, Mapping):
        pairs = list(items.items())
    elif isinstance(items, Iterable):
        flat = list(items)
        if len(flat) % 2:
            raise ValueError(f"{what} need an even number of items, got {len(flat)}")
        pairs = list(zip(flat[::2], flat[1::2]))
    else:
        raise TypeError(f"{what} must be a mapping or a flat sequence of pairs")
    if not 1 <= len(pairs) <= max_pairs:
        raise ValueError(f"{what} support 1 to {max_pairs} pairs, got {len(pairs)}")
    return pairs


def encode_tags(items: Any) -> str:
    """Encode tags given as ``(k1, v1, k2, v2, ...)`` or a mapping as ``k1=v1,k2=v2``."""
    pairs = _pairs(items, _MAX_TAG_PAIRS, "tags")
    return ",".join(f"{encode_key(k)}={encode_key(v)}" for k, v in pairs)


def encode_fields(items: Any) -> str:
    """Encode fields given as ``(k1, v1, k2, v2, ...)`` or a mapping as ``k1=v1,k2=v2``."""
    pairs = _pairs(items, _MAX_FIELD_PAIRS, "fields")
    return ",".join(f"{encode_key(k)}={encode_value(v)}" for k, v in pairs)


def encode_timestamp(value: Any) -> str:
    """Encode an integer timestamp, e.g. ``1465839830100400200``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"timestamp must be an integer, got {type(value).__name__}")
    if not _I64_MIN <= value <= _U64_MAX:
        raise ValueError(f"timestamp out of range: {value}")
    return str(int(value))