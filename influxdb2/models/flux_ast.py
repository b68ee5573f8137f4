"""Flux abstract syntax tree, source file and CSV dialect models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from influxdb2.models.schema import Model


def _items(**extra: Any) -> Any:
    return field(default_factory=list, metadata={"omit_empty": True, **extra})


@dataclass
class Identifier(Model):
    """A valid Flux identifier."""

    type: Optional[str] = None
    name: Optional[str] = None


@dataclass
class StringLiteral(Model):
    """A string literal, written between double quote marks."""

    type: Optional[str] = None
    value: Optional[str] = None


@dataclass
class PropertyKey(Model):
    """The key of a property."""

    type: Optional[str] = None
    name: Optional[str] = None
    value: Optional[str] = None


@dataclass
class Duration(Model):
    """A length of time and its unit; the atom of duration literals."""

    type: Optional[str] = None
    magnitude: Optional[int] = None
    unit: Optional[str] = None


@dataclass
class DictItem(Model):
    """A key/value pair in a dictionary."""

    type: Optional[str] = None
    key: Optional[Expression] = None
    val: Optional[Expression] = None


@dataclass
class Property(Model):
    """The value associated with a key."""

    type: Optional[str] = None
    key: Optional[PropertyKey] = None
    value: Optional[Expression] = None


@dataclass
class CallExpression(Model):
    """A function call."""

    type: Optional[str] = None
    callee: Optional[Expression] = None
    arguments: list[Expression] = _items()


@dataclass
class Expression(Model):
    """Any Flux expression."""

    type: Optional[str] = None
    elements: list[DictItem] = _items()
    params: list[Property] = _items()
    body: Optional[Node] = None
    operator: Optional[str] = None
    left: Optional[Expression] = None
    right: Optional[Expression] = None
    callee: Optional[Expression] = None
    arguments: list[Expression] = _items()
    test: Optional[Expression] = None
    alternate: Optional[Expression] = None
    consequent: Optional[Expression] = None
    object: Optional[Expression] = None
    property: Optional[PropertyKey] = None
    array: Optional[Expression] = None
    index: Optional[Expression] = None
    properties: list[Property] = _items()
    expression: Optional[Expression] = None
    argument: Optional[Expression] = None
    call: Optional[CallExpression] = None
    value: Optional[str] = None
    values: list[Duration] = _items()
    name: Optional[str] = None


@dataclass
class MemberExpression(Model):
    """Access to a property of an object."""

    type: Optional[str] = None
    object: Optional[Expression] = None
    property: Optional[PropertyKey] = None


@dataclass
class VariableAssignment(Model):
    """The declaration of a variable."""

    type: Optional[str] = None
    id: Optional[Identifier] = None
    init: Optional[Expression] = None


@dataclass
class Node(Model):
    """A node of a function body: a block or an expression."""

    type: Optional[str] = None
    elements: list[DictItem] = _items()
    params: list[Property] = _items()
    body: list[Statement] = _items()
    operator: Optional[str] = None
    left: Optional[Expression] = None
    right: Optional[Expression] = None
    callee: Optional[Expression] = None
    # Left out of the output when empty, yet expected on input.
    arguments: list[Expression] = _items(required=True)
    test: Optional[Expression] = None
    alternate: Optional[Expression] = None
    consequent: Optional[Expression] = None
    object: Optional[Expression] = None
    property: Optional[PropertyKey] = None
    array: Optional[Expression] = None
    index: Optional[Expression] = None
    properties: list[Property] = _items()
    expression: Optional[Expression] = None
    argument: Optional[Expression] = None
    call: Optional[CallExpression] = None
    value: Optional[str] = None
    values: list[Duration] = _items()
    name: Optional[str] = None


@dataclass
class Statement(Model):
    """A Flux statement."""

    type: Optional[str] = None
    text: Optional[str] = None
    id: Optional[Identifier] = None
    init: Optional[Expression] = None
    member: Optional[MemberExpression] = None
    expression: Optional[Expression] = None
    argument: Optional[Expression] = None
    assignment: Optional[VariableAssignment] = None


@dataclass
class ImportDeclaration(Model):
    """A package import."""

    type: Optional[str] = None
    as_: Optional[Identifier] = field(default=None, metadata={"key": "as"})
    path: Optional[StringLiteral] = None


@dataclass
class PackageClause(Model):
    """A package identifier."""

    type: Optional[str] = None
    name: Optional[Identifier] = None


@dataclass
class File(Model):
    """The source of a single file."""

    type: Optional[str] = None
    name: Optional[str] = None
    package: Optional[PackageClause] = None
    imports: list[ImportDeclaration] = _items()
    body: list[Statement] = _items()


@dataclass
class Package(Model):
    """A complete package source tree."""

    type: Optional[str] = None
    path: Optional[str] = None
    package: Optional[str] = None
    files: list[File] = _items()


class Annotations(str, Enum):
    """CSV column annotations."""

    GROUP = "group"
    DATATYPE = "datatype"
    DEFAULT = "default"


class DateTimeFormat(str, Enum):
    """Timestamp format of CSV output."""

    RFC3339 = "Rfc3339"
    RFC3339_NANO = "Rfc3339Nano"


@dataclass
class Dialect(Model):
    """Options that change the default CSV output format."""

    camel_case = True

    header: Optional[bool] = None
    delimiter: Optional[str] = None
    annotations: list[Annotations] = field(default_factory=list, metadata={"required": True})
    comment_prefix: Optional[str] = None
    date_time_format: Optional[DateTimeFormat] = None