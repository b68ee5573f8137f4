"""Organizations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from influxdb2.models.links import Links
from influxdb2.models.schema import Model


class Status(str, Enum):
    """Whether an organization is active."""

    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass
class OrganizationLinks(Model):
    """Links of an organization."""

    self_: Optional[str] = field(default=None, metadata={"key": "self"})
    members: Optional[str] = None
    owners: Optional[str] = None
    labels: Optional[str] = None
    secrets: Optional[str] = None
    buckets: Optional[str] = None
    tasks: Optional[str] = None
    dashboards: Optional[str] = None


@dataclass
class Organization(Model):
    """An organization."""

    camel_case = True

    name: str
    links: Optional[OrganizationLinks] = None
    id: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    status: Optional[Status] = None


@dataclass
class Organizations(Model):
    """A list of organizations."""

    links: Optional[Links] = None
    orgs: list[Organization] = field(default_factory=list, metadata={"omit_empty": True})