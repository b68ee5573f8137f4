"""Health of a database instance."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from influxdb2.models.schema import Model


class Status(str, Enum):
    """Outcome of a health check; the wire value is the lower-case name."""

    def _generate_next_value_(name, start, count, last_values):  # noqa: N805
        return name.lower()

    PASS = auto()
    FAIL = auto()


@dataclass
class HealthCheck(Model):
    """Health of an instance, possibly made up of nested checks."""

    camel_case = True

    name: str
    status: Status
    message: Optional[str] = None
    checks: list[HealthCheck] = field(default_factory=list, metadata={"omit_empty": True})
    version: Optional[str] = None
    commit: Optional[str] = None