"""Resources that permissions apply to."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from influxdb2.models.schema import Model


class ResourceType(str, Enum):
    """Kind of resource."""

    AUTHORIZATIONS = "authorizations"
    BUCKETS = "buckets"
    DASHBOARDS = "dashboards"
    ORGS = "orgs"
    SOURCES = "sources"
    TASKS = "tasks"
    TELEGRAFS = "telegrafs"
    USERS = "users"
    VARIABLES = "variables"
    SCRAPERS = "scrapers"
    SECRETS = "secrets"
    LABELS = "labels"
    VIEWS = "views"
    DOCUMENTS = "documents"
    NOTIFICATION_RULES = "notificationRules"
    NOTIFICATION_ENDPOINTS = "notificationEndpoints"
    CHECKS = "checks"
    DBRP = "dbrp"


@dataclass
class Resource(Model):
    """A resource; without an id it means all resources of its type."""

    camel_case = True

    type: ResourceType
    id: Optional[str] = None
    name: Optional[str] = None
    org_id: Optional[str] = field(default=None, metadata={"key": "orgID"})
    org: Optional[str] = None