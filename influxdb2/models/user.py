"""Users."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from influxdb2.models.schema import Model


class Status(str, Enum):
    """Whether a user is active."""

    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass
class UserLinks(Model):
    """Links of a user."""

    self_: Optional[str] = field(default=None, metadata={"key": "self"})


@dataclass
class User(Model):
    """A user."""

    name: str
    id: Optional[str] = None
    oauth_id: Optional[str] = field(default=None, metadata={"key": "oauthID"})
    status: Optional[Status] = None
    links: Optional[UserLinks] = None


@dataclass
class UsersLinks(Model):
    """Links of a list of users."""

    self_: Optional[str] = field(default=None, metadata={"key": "self"})


@dataclass
class Users(Model):
    """A list of users."""

    links: Optional[UsersLinks] = None
    users: list[User] = field(default_factory=list, metadata={"omit_empty": True})