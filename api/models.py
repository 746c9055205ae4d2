"""SQLAlchemy models for the worksite registry.

One table per entity. References to other entities are stored as plain
identifier strings; their existence is not checked on write.
"""

import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, Float, String, Text
from sqlalchemy.orm import Mapped, declared_attr, mapped_column, relationship

from core.database import Base


def utcnow() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


def new_id() -> str:
    return uuid.uuid4().hex


class TimestampMixin:
    """Mixin that adds created_at and updated_at timestamp columns."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(DateTime(timezone=True), default=utcnow, index=True)

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


class IdMixin:
    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)


class StatusFlagsMixin:
    """is_active / is_deleted flags."""

    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, index=True)


class Customer(IdMixin, StatusFlagsMixin, TimestampMixin, Base):
    """Customer account. Soft-deleted."""

    __tablename__ = "customers"

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # pbkdf2_sha256 hash, never returned by the API
    password: Mapped[str] = mapped_column(String(255), nullable=False)


class Manager(IdMixin, StatusFlagsMixin, TimestampMixin, Base):
    """Activity manager. Soft-deleted."""

    __tablename__ = "managers"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    admin: Mapped[str | None] = mapped_column(String(32), nullable=True)


class ServiceCompany(IdMixin, StatusFlagsMixin, TimestampMixin, Base):
    """Third-party service company. Physically deleted despite carrying flags."""

    __tablename__ = "service_companies"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    map: Mapped[str | None] = mapped_column(Text, nullable=True)
    url: Mapped[str | None] = mapped_column(String(500), nullable=True)


class Timesheet(IdMixin, TimestampMixin, Base):
    """Hours logged by a worker on an activity. Physically deleted."""

    __tablename__ = "timesheets"

    activity: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    worker: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    manager: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    hours_spent: Mapped[float | None] = mapped_column(Float, nullable=True)
    date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    file: Mapped[str] = mapped_column(String(500), nullable=False)
    is_pending: Mapped[bool] = mapped_column(Boolean, default=True)
    is_rejected: Mapped[bool] = mapped_column(Boolean, default=False)
    is_accepted: Mapped[bool] = mapped_column(Boolean, default=False)
    is_resubmitted: Mapped[bool] = mapped_column(Boolean, default=False)
    rejection_reason: Mapped[list[str]] = mapped_column(JSON, default=list)

    # Read-only view of the referenced manager; None when the id is dangling
    manager_record: Mapped[Manager | None] = relationship(
        primaryjoin="foreign(Timesheet.manager) == Manager.id",
        viewonly=True,
        lazy="selectin",
    )


class ProjectStatus(IdMixin, TimestampMixin, Base):
    """Lookup table of project workflow states. Physically deleted."""

    __tablename__ = "project_statuses"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    color: Mapped[str | None] = mapped_column(String(32), nullable=True)


class LocationType(IdMixin, TimestampMixin, Base):
    __tablename__ = "location_types"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class Location(IdMixin, TimestampMixin, Base):
    """Physical site. Physically deleted.

    ``location_managers`` embeds ``{"manager": <id>, "code": <str>}`` pairs.
    """

    __tablename__ = "locations"

    custom_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    latitude: Mapped[str | None] = mapped_column(String(50), nullable=True)
    longitude: Mapped[str | None] = mapped_column(String(50), nullable=True)
    map: Mapped[str | None] = mapped_column(Text, nullable=True)
    nation: Mapped[str] = mapped_column(String(255), nullable=False)
    street: Mapped[str | None] = mapped_column(String(500), nullable=True)
    owner: Mapped[str | None] = mapped_column(String(255), nullable=True)
    province: Mapped[str] = mapped_column(String(255), nullable=False)
    region: Mapped[str] = mapped_column(String(255), nullable=False)
    image: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location_managers: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, default=list
    )
    location_type: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    is_near_another_location: Mapped[bool] = mapped_column(Boolean, default=False)


class Project(IdMixin, StatusFlagsMixin, TimestampMixin, Base):
    """Work order at a customer location. Soft-deleted."""

    __tablename__ = "projects"

    custom_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    prev_custom_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    customer: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    location: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    project_manager: Mapped[str] = mapped_column(String(32), nullable=False)
    admin: Mapped[str | None] = mapped_column(String(32), nullable=True)
    status: Mapped[str | None] = mapped_column(String(32), nullable=True)
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    task: Mapped[str] = mapped_column(String(255), nullable=False)
    order_number: Mapped[str] = mapped_column(String(100), nullable=False)
    assignment_date: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    scheda_radio_date: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    status_history: Mapped[list[str]] = mapped_column(JSON, default=list)
