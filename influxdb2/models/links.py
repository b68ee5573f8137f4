"""Pagination links returned with lists of resources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from influxdb2.models.schema import Model


@dataclass
class Links(Model):
    """Links to the current, next and previous page."""

    camel_case = True

    self_: str = field(metadata={"key": "self"})
    next: Optional[str] = None
    prev: Optional[str] = None