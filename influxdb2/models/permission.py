"""Permissions on resources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from influxdb2.models.resource import Resource
from influxdb2.models.schema import Model


class Action(str, Enum):
    """Kind of access granted."""

    READ = "read"
    WRITE = "write"


@dataclass
class Permission(Model):
    """Permission to act on a resource."""

    action: Action
    resource: Resource