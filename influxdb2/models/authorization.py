"""Authorization tokens."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from influxdb2.models.permission import Permission
from influxdb2.models.schema import Model


class Status(str, Enum):
    """Whether a token is usable; requests with an inactive one are rejected."""

    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass
class AuthorizationAllOfLinks(Model):
    """Links of an authorization."""

    self_: Optional[str] = field(default=None, metadata={"key": "self"})
    user: Optional[str] = None


@dataclass
class Authorization(Model):
    """An authorization scoped to an organization with at least one permission."""

    camel_case = True

    org_id: str = field(metadata={"key": "orgID"})
    permissions: list[Permission]
    status: Optional[Status] = None
    description: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    id: Optional[str] = None
    token: Optional[str] = None
    user_id: Optional[str] = field(default=None, metadata={"key": "userID"})
    user: Optional[str] = None
    org: Optional[str] = None
    links: Optional[AuthorizationAllOfLinks] = None