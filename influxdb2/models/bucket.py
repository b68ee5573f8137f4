"""Buckets and bucket requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from influxdb2.models.label import Label
from influxdb2.models.links import Links
from influxdb2.models.retention_rule import RetentionRule
from influxdb2.models.schema import Model


class BucketType(str, Enum):
    """Kind of bucket."""

    USER = "user"
    SYSTEM = "system"


@dataclass
class BucketLinks(Model):
    """Links of a bucket."""

    camel_case = True

    labels: Optional[str] = None
    members: Optional[str] = None
    org: Optional[str] = None
    owners: Optional[str] = None
    self_: Optional[str] = field(default=None, metadata={"key": "self"})
    write: Optional[str] = None


@dataclass
class Bucket(Model):
    """A bucket; no retention rules means data never expires."""

    camel_case = True

    name: str
    retention_rules: list[RetentionRule]
    links: Optional[BucketLinks] = None
    id: Optional[str] = None
    type: Optional[BucketType] = None
    description: Optional[str] = None
    org_id: Optional[str] = field(default=None, metadata={"key": "orgID"})
    rp: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    labels: list[Label] = field(default_factory=list, metadata={"omit_empty": True})


@dataclass
class Buckets(Model):
    """A list of buckets."""

    camel_case = True

    links: Optional[Links] = None
    buckets: list[Bucket] = field(default_factory=list, metadata={"omit_empty": True})


@dataclass
class PostBucketRequest(Model):
    """Request to create a bucket."""

    camel_case = True

    org_id: str = field(metadata={"key": "orgID"})
    name: str
    description: Optional[str] = None
    rp: Optional[str] = None
    retention_rules: list[RetentionRule] = field(default_factory=list)