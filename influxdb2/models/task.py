"""Tasks: Flux scripts run on a schedule."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from influxdb2.models.label import Label
from influxdb2.models.links import Links
from influxdb2.models.schema import Model


class TaskStatusType(str, Enum):
    """Whether a task is active."""

    ACTIVE = "active"
    INACTIVE = "inactive"


def _nullable(key: Optional[str] = None) -> Any:
    metadata: dict[str, Any] = {"keep_none": True}
    if key:
        metadata["key"] = key
    return field(default=None, metadata=metadata)


def _required_str(key: Optional[str] = None) -> Any:
    metadata: dict[str, Any] = {"required": True}
    if key:
        metadata["key"] = key
    return field(default="", metadata=metadata)


@dataclass
class TaskLinks(Model):
    """Links of a task."""

    self_: Optional[str] = field(default=None, metadata={"key": "self"})
    labels: Optional[str] = None
    logs: Optional[str] = None
    members: Optional[str] = None
    owners: Optional[str] = None
    runs: Optional[str] = None


@dataclass
class Task(Model):
    """A task; unset optional values are written as null."""

    camel_case = True

    id: str = _required_str()
    name: str = _required_str()
    org_id: str = _required_str("orgID")
    flux: str = _required_str()
    owner_id: Optional[str] = _nullable("ownerID")
    org: Optional[str] = _nullable()
    status: Optional[TaskStatusType] = _nullable()
    type_: Optional[str] = _nullable("type")
    authorization_id: Optional[str] = _nullable("authorizationID")
    description: Optional[str] = _nullable()
    cron: Optional[str] = _nullable()
    every: Optional[str] = _nullable()
    last_run_error: Optional[str] = _nullable()
    last_run_status: Optional[str] = _nullable()
    latest_completed: Optional[str] = _nullable()
    offset: Optional[str] = _nullable()
    links: Optional[TaskLinks] = _nullable()
    labels: list[Label] = field(default_factory=list, metadata={"omit_empty": True})
    created_at: Optional[str] = _nullable()
    updated_at: Optional[str] = _nullable()


@dataclass
class Tasks(Model):
    """A list of tasks."""

    links: Optional[Links] = None
    tasks: list[Task] = field(default_factory=list, metadata={"omit_empty": True})