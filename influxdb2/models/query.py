"""Flux queries and the analysis of them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from influxdb2.models.flux_ast import Annotations, Dialect, File, Package
from influxdb2.models.schema import Model


class QueryType(str, Enum):
    """Language of a query; always Flux."""

    FLUX = "flux"


def _default_dialect() -> Dialect:
    return Dialect(
        annotations=[Annotations.DATATYPE, Annotations.GROUP, Annotations.DEFAULT]
    )


@dataclass
class Query(Model):
    """A Flux query; by default results carry datatype, group and default annotations."""

    query: str = field(default="", metadata={"required": True})
    extern: Optional[File] = None
    type: Optional[QueryType] = None
    dialect: Optional[Dialect] = field(default_factory=_default_dialect)
    now: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> Query:
        """Build a query from its JSON object form; a missing dialect stays unset."""
        query = super().from_dict(data)
        if isinstance(data, Mapping) and "dialect" not in data:
            query.dialect = None
        return query


@dataclass
class FluxSuggestion(Model):
    """A suggested Flux function and its parameters."""

    name: Optional[str] = None
    params: Optional[dict[str, str]] = None


@dataclass
class FluxSuggestions(Model):
    """A list of suggested Flux functions."""

    funcs: list[FluxSuggestion] = field(default_factory=list, metadata={"omit_empty": True})


@dataclass
class AnalyzeQueryResponseErrors(Model):
    """An error found in a query and where it is."""

    line: Optional[int] = None
    column: Optional[int] = None
    character: Optional[int] = None
    message: Optional[str] = None


@dataclass
class AnalyzeQueryResponse(Model):
    """Errors found by analysing a query."""

    errors: list[AnalyzeQueryResponseErrors] = field(
        default_factory=list, metadata={"omit_empty": True}
    )


@dataclass
class AstResponse(Model):
    """The syntax tree of a Flux query."""

    ast: Optional[Package] = None


@dataclass
class LanguageRequest(Model):
    """A Flux query to be analysed."""

    query: str