"""Building data points and rendering them as line protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, BinaryIO, Mapping, Optional, Union

from influxdb2.writable import encode_value

FieldValue = Union[bool, float, int, str]

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _escape_table(delimiters: str) -> dict[int, str]:
    return str.maketrans({char: "\\" + char for char in delimiters})


_MEASUREMENT_TABLE = _escape_table(", ")
_KEY_TABLE = _escape_table(",= ")
_STRING_TABLE = _escape_table('"')


class DataPointError(Exception):
    """Raised when a data point is built without any field."""

    def __init__(self, data_point_builder: "DataPointBuilder") -> None:
        self.data_point_builder = data_point_builder
        super().__init__(
            "All `DataPoints` must have at least one field. "
            f"Builder contains: {data_point_builder!r}"
        )


def _require_str(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a str, got {type(value).__name__}")
    return value


def _require_int64(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")
    if not _I64_MIN <= value <= _I64_MAX:
        raise ValueError(f"{what} out of 64-bit signed range: {value}")
    return int(value)


def _check_field_value(value: Any) -> FieldValue:
    if isinstance(value, (bool, float, str)):
        return value
    if isinstance(value, int):
        return _require_int64(value, "field value")
    raise TypeError(f"unsupported field value type: {type(value).__name__}")


def escape_measurement(value: str) -> str:
    """Escape commas and spaces in a measurement name."""
    return value.translate(_MEASUREMENT_TABLE)


def escape_tag_key(value: str) -> str:
    """Escape commas, equals signs and spaces in a tag key."""
    return value.translate(_KEY_TABLE)


def escape_tag_value(value: str) -> str:
    """Escape commas, equals signs and spaces in a tag value."""
    return value.translate(_KEY_TABLE)


def escape_field_key(value: str) -> str:
    """Escape commas, equals signs and spaces in a field key."""
    return value.translate(_KEY_TABLE)


def format_field_value(value: FieldValue) -> str:
    """Render a field value: ``t``/``f``, a float, ``<n>i`` or a quoted string."""
    if isinstance(value, bool):
        return "t" if value else "f"
    if isinstance(value, int):
        return f"{int(value)}i"
    if isinstance(value, float):
        return encode_value(value)
    if isinstance(value, str):
        return f'"{value.translate(_STRING_TABLE)}"'
    raise TypeError(f"unsupported field value type: {type(value).__name__}")


class DataPointBuilder:
    """Incrementally constructs a DataPoint; create it with ``DataPoint.builder``."""

    def __init__(self, measurement: str) -> None:
        self._measurement = _require_str(measurement, "measurement")
        self._tags: dict[str, str] = {}
        self._fields: dict[str, FieldValue] = {}
        self._timestamp: Optional[int] = None

    def __repr__(self) -> str:
        return (
            f"DataPointBuilder(measurement={self._measurement!r}, "
            f"tags={dict(sorted(self._tags.items()))!r}, "
            f"fields={dict(sorted(self._fields.items()))!r}, "
            f"timestamp={self._timestamp!r})"
        )

    def tag(self, name: str, value: str) -> "DataPointBuilder":
        """Set a tag, replacing any existing tag of the same name."""
        self._tags[_require_str(name, "tag name")] = _require_str(value, "tag value")
        return self

    def field(self, name: str, value: FieldValue) -> "DataPointBuilder":
        """Set a field, replacing any existing field of the same name."""
        self._fields[_require_str(name, "field name")] = _check_field_value(value)
        return self

    def timestamp(self, value: int) -> "DataPointBuilder":
        """Set the timestamp, replacing any existing one."""
        self._timestamp = _require_int64(value, "timestamp")
        return self

    def build(self) -> "DataPoint":
        """Construct the data point; raises DataPointError if no field is set."""
        if not self._fields:
            raise DataPointError(self)
        return DataPoint(
            measurement=self._measurement,
            tags=dict(sorted(self._tags.items())),
            fields=dict(sorted(self._fields.items())),
            timestamp=self._timestamp,
        )


@dataclass(frozen=True)
class DataPoint:
    """A single point of information to send to the database."""

    measurement: str
    tags: Mapping[str, str]
    fields: Mapping[str, FieldValue]
    timestamp: Optional[int] = None

    @staticmethod
    def builder(measurement: str) -> DataPointBuilder:
        """Create a builder to incrementally construct a DataPoint."""
        return DataPointBuilder(measurement)

    def to_line_protocol(self) -> str:
        """Render this point as one line of line protocol, newline included."""
        head = escape_measurement(self.measurement) + "".join(
            f",{escape_tag_key(k)}={escape_tag_value(v)}"
            for k, v in sorted(self.tags.items())
        )
        fields = ",".join(
            f"{escape_field_key(k)}={format_field_value(v)}"
            for k, v in sorted(self.fields.items())
        )
        line = f"{head} {fields}" if fields else head
        if self.timestamp is not None:
            line += f" {self.timestamp}"
        return line + "\n"

    def write_to(self, stream: BinaryIO) -> None:
        """Write this point as UTF-8 line protocol to a binary stream."""
        stream.write(self.to_line_protocol().encode("utf-8"))