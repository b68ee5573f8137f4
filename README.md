# influxdb2

Building blocks for talking to InfluxDB 2: encoding of data points into line
protocol, and data models for the InfluxDB 2 HTTP API that convert to and
from JSON. The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Writing data points

`influxdb2.models.data_point` builds points and renders them as line
protocol:

```python
from influxdb2.models.data_point import DataPoint

point = (
    DataPoint.builder("swap")
    .tag("host", "server01")
    .tag("name", "disk0")
    .field("in", 3)
    .field("out", 4)
    .timestamp(1)
    .build()
)

print(point.to_line_protocol(), end="")
# swap,host=server01,name=disk0 in=3i,out=4i 1
```

- `DataPoint.builder(measurement)` returns a `DataPointBuilder`. Its `tag`,
  `field` and `timestamp` methods replace any earlier value of the same name
  and return the builder, so calls can be chained.
- Field values may be `bool` (written `t` / `f`), `float`, `int` (written with
  an `i` suffix, limited to the signed 64-bit range) or `str` (written in
  double quotes, with inner double quotes escaped). Other types raise
  `TypeError`.
- The timestamp is a signed 64-bit integer; it is written as given and left
  out when not set.
- Tags and fields come out sorted by name. Commas and spaces are escaped in
  measurements; commas, equals signs and spaces are escaped in tag keys, tag
  values and field keys.
- `build()` raises `DataPointError` when no field has been set; the error
  keeps the builder in its `data_point_builder` attribute.
- `DataPoint.to_line_protocol()` returns the line, ending with a newline;
  `DataPoint.write_to(stream)` writes it as UTF-8 to a binary stream.

The helpers `escape_measurement`, `escape_tag_key`, `escape_tag_value`,
`escape_field_key` and `format_field_value` in the same module can be used on
their own.

## Encoding tuples

`influxdb2.writable` encodes plain Python values:

```python
from influxdb2.writable import Unsigned, encode_fields, encode_tags

encode_tags(("host", "server01", "region", "eu"))  # 'host=server01,region=eu'
encode_fields(("count", Unsigned(33), "ok", True))  # 'count=33u,ok=t'
```

- `encode_value(value)` encodes a float, an `int` (suffix `i`), an `Unsigned`
  (suffix `u`), a `bool` (`t` / `f`), a `str` (in double quotes, not escaped)
  or `None` (as `"None"`).
- `encode_key(key)` encodes a `str`, a non-negative integer or `None`
  (as `None`).
- `encode_tags(items)` and `encode_fields(items)` take a flat sequence
  `(k1, v1, k2, v2, ...)` or a mapping. Tags take 1 to 3 pairs, fields 1 to 7;
  other counts raise `ValueError`.
- `encode_timestamp(value)` writes an integer timestamp.
- `Unsigned` is an `int` subclass limited to the unsigned 64-bit range.

## API models

The modules under `influxdb2.models` hold the request and response shapes of
the InfluxDB 2 API:

| Module | Classes |
| --- | --- |
| `authorization` | `Authorization`, `AuthorizationAllOfLinks`, `Status` |
| `bucket` | `Bucket`, `BucketLinks`, `Buckets`, `PostBucketRequest`, `BucketType` |
| `flux_ast` | `File`, `Package`, `Statement`, `Expression`, `Node`, `Dialect`, `Annotations`, `DateTimeFormat` and the other Flux AST nodes |
| `health` | `HealthCheck`, `Status` |
| `label` | `Label`, `LabelCreateRequest`, `LabelResponse`, `LabelsResponse`, `LabelUpdate` |
| `links` | `Links` |
| `onboarding` | `IsOnboarding`, `OnboardingRequest`, `OnboardingResponse` |
| `organization` | `Organization`, `OrganizationLinks`, `Organizations`, `Status` |
| `permission` | `Permission`, `Action` |
| `query` | `Query`, `QueryType`, `FluxSuggestion`, `FluxSuggestions`, `AnalyzeQueryResponse`, `AnalyzeQueryResponseErrors`, `AstResponse`, `LanguageRequest` |
| `resource` | `Resource`, `ResourceType` |
| `retention_rule` | `RetentionRule`, `RetentionType` |
| `task` | `Task`, `TaskLinks`, `Tasks`, `TaskStatusType` |
| `user` | `User`, `UserLinks`, `Users`, `UsersLinks`, `Status` |

Every model is a dataclass deriving from `influxdb2.models.schema.Model`,
which gives it `to_dict()`, `from_dict(data)`, `to_json()` and
`from_json(text)`, using the API's own key names (`orgID`, `retentionRules`,
`self` and so on):

```python
from influxdb2.models.bucket import Bucket
from influxdb2.models.retention_rule import RetentionRule, RetentionType

bucket = Bucket(name="metrics",
                retention_rules=[RetentionRule(RetentionType.EXPIRE, 3600)])
text = bucket.to_json()
assert Bucket.from_json(text) == bucket
```

- Fields that are `None` are left out when serialising, and most empty lists
  are left out too. `Task` is the exception for `None`: its unset optional
  values are written as `null`.
- Enumerations serialise to their string values, for example
  `TaskStatusType.ACTIVE` becomes `"active"`.
- `from_dict` ignores unknown keys, raises `ValueError` when a required key
  is missing or an enumeration value is unknown, and `TypeError` when a value
  has the wrong JSON type.
- A new `Query` carries by default a `Dialect` asking for the `datatype`,
  `group` and `default` annotations; a query read with `from_dict` without a
  `dialect` key has none.

## What this package does not do

It does not talk to a server. There is no HTTP client here: no functions for
writing points, running queries, or managing buckets, organizations, users,
tasks or tokens over the network. The package produces the line protocol text
and the JSON bodies such calls would send, and reads the JSON they would
return; sending and receiving them is left to the HTTP library of your choice.