"""Labels and the requests and responses that carry them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from influxdb2.models.links import Links
from influxdb2.models.schema import Model


@dataclass
class Label(Model):
    """A label; its properties are key/value pairs."""

    camel_case = True

    id: Optional[str] = None
    org_id: Optional[str] = field(default=None, metadata={"key": "orgID"})
    name: Optional[str] = None
    properties: Optional[dict[str, str]] = None


@dataclass
class LabelCreateRequest(Model):
    """Request to create a new label."""

    camel_case = True

    org_id: str = field(metadata={"key": "orgID"})
    name: str
    properties: Optional[dict[str, str]] = None


@dataclass
class LabelResponse(Model):
    """A single label with its links."""

    camel_case = True

    label: Optional[Label] = None
    links: Optional[Links] = None


@dataclass
class LabelsResponse(Model):
    """A list of labels with its links."""

    camel_case = True

    labels: list[Label] = field(default_factory=list, metadata={"omit_empty": True})
    links: Optional[Links] = None


@dataclass
class LabelUpdate(Model):
    """Request to update a label."""

    camel_case = True

    name: Optional[str] = None
    properties: Optional[dict[str, str]] = None