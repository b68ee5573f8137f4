"""Retention rules of buckets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from influxdb2.models.schema import Model


class RetentionType(str, Enum):
    """Kind of retention rule."""

    EXPIRE = "expire"


@dataclass
class RetentionRule(Model):
    """How long data is kept; ``every_seconds`` of 0 means forever."""

    camel_case = True

    type: RetentionType
    every_seconds: int
    shard_group_duration_seconds: Optional[int] = None