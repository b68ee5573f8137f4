"""Initial setup of a database instance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from influxdb2.models.authorization import Authorization
from influxdb2.models.bucket import Bucket
from influxdb2.models.organization import Organization
from influxdb2.models.schema import Model
from influxdb2.models.user import User


@dataclass
class IsOnboarding(Model):
    """Whether the initial user, organization and bucket may still be created."""

    allowed: bool = False


@dataclass
class OnboardingRequest(Model):
    """Request to set up the initial user, organization and bucket."""

    camel_case = True

    username: str
    org: str
    bucket: str
    password: Optional[str] = None
    retention_period_seconds: Optional[int] = None
    # Despite its name this value is in nanoseconds.
    retention_period_hrs: Optional[int] = None


@dataclass
class OnboardingResponse(Model):
    """What onboarding created."""

    user: Optional[User] = None
    org: Optional[Organization] = None
    bucket: Optional[Bucket] = None
    auth: Optional[Authorization] = None