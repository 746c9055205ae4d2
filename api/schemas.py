"""Pydantic schemas for API request/response validation.

Wire format is camelCase (``hoursSpent``, ``isDeleted``); attributes are
snake_case. Response schemas read straight from ORM rows.
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StringConstraints,
    field_serializer,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StrictCamelModel(CamelModel):
    """Declarative request contract: unknown keys are rejected."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )


def _reject_null(kind: str) -> BeforeValidator:
    def check(value: Any) -> Any:
        if value is None:
            raise PydanticCustomError(
                "null_not_allowed", "must be {kind}", {"kind": kind}
            )
        return value

    return BeforeValidator(check)


NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]

# Partial-update fields backed by NOT NULL columns: they may be left out of
# the body, but an explicit null is a validation error.
PatchStr = Annotated[str | None, _reject_null("a string")]
PatchNonEmptyStr = Annotated[NonEmptyStr | None, _reject_null("a string")]
PatchBool = Annotated[bool | None, _reject_null("a boolean")]
PatchDatetime = Annotated[datetime | None, _reject_null("a valid date")]
PatchStrList = Annotated[list[str] | None, _reject_null("an array")]


class RecordResponse(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


# =============================================================================
# Customer
# =============================================================================


class CustomerCreate(CamelModel):
    email: str
    name: str
    password: str
    is_active: bool = True
    is_deleted: bool = False


class CustomerUpdate(CamelModel):
    email: PatchStr = None
    name: PatchStr = None
    password: PatchStr = None
    is_active: PatchBool = None
    is_deleted: PatchBool = None


class CustomerResponse(RecordResponse):
    """Customer as returned by the API. The password hash is never exposed."""

    email: str
    name: str
    is_active: bool
    is_deleted: bool


# =============================================================================
# Manager
# =============================================================================


class ManagerCreate(CamelModel):
    name: str
    email: str
    phone: str | None = None
    admin: str | None = None
    is_active: bool = True
    is_deleted: bool = False


class ManagerUpdate(CamelModel):
    name: PatchStr = None
    email: PatchStr = None
    phone: str | None = None
    admin: str | None = None
    is_active: PatchBool = None
    is_deleted: PatchBool = None


class ManagerResponse(RecordResponse):
    name: str
    email: str
    phone: str | None = None
    admin: str | None = None
    is_active: bool
    is_deleted: bool


# =============================================================================
# Service company
# =============================================================================


class ServiceCompanyCreate(CamelModel):
    name: str
    address: str
    description: str | None = None
    map: str | None = None
    url: str | None = None
    is_active: bool = True
    is_deleted: bool = False


class ServiceCompanyUpdate(CamelModel):
    name: PatchStr = None
    address: PatchStr = None
    description: str | None = None
    map: str | None = None
    url: str | None = None
    is_active: PatchBool = None
    is_deleted: PatchBool = None


class ServiceCompanyResponse(RecordResponse):
    name: str
    address: str
    description: str | None = None
    map: str | None = None
    url: str | None = None
    is_active: bool
    is_deleted: bool


# =============================================================================
# Timesheet
# =============================================================================


class TimesheetCreate(CamelModel):
    activity: str
    worker: str
    manager: str
    start_time: datetime
    end_time: datetime
    hours_spent: float | None = None
    date: datetime | None = None
    file: str
    is_pending: bool = True
    is_rejected: bool = False
    is_accepted: bool = False
    is_resubmitted: bool = False
    rejection_reason: list[str] = Field(default_factory=list)


class TimesheetUpdate(CamelModel):
    activity: PatchStr = None
    worker: PatchStr = None
    manager: PatchStr = None
    start_time: PatchDatetime = None
    end_time: PatchDatetime = None
    hours_spent: float | None = None
    date: datetime | None = None
    file: PatchStr = None
    is_pending: PatchBool = None
    is_rejected: PatchBool = None
    is_accepted: PatchBool = None
    is_resubmitted: PatchBool = None
    rejection_reason: PatchStrList = None


class ManagerSummary(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: str
    name: str
    email: str


class TimesheetResponse(RecordResponse):
    """``manager`` is rendered as the manager summary when the id resolves,
    otherwise as the bare id."""

    activity: str
    worker: str
    manager: str
    manager_record: ManagerSummary | None = Field(default=None, exclude=True)
    start_time: datetime
    end_time: datetime
    hours_spent: float | None = None
    date: datetime | None = None
    file: str
    is_pending: bool
    is_rejected: bool
    is_accepted: bool
    is_resubmitted: bool
    rejection_reason: list[str] = Field(default_factory=list)

    @field_serializer("manager")
    def populate_manager(self, manager: str) -> ManagerSummary | str:
        if self.manager_record is None:
            return manager
        return self.manager_record


# =============================================================================
# Project status
# =============================================================================


class ProjectStatusCreate(StrictCamelModel):
    name: str = Field(min_length=1)
    description: str | None = None
    color: str | None = None


class ProjectStatusUpdate(StrictCamelModel):
    name: PatchNonEmptyStr = None
    description: str | None = None
    color: str | None = None


class ProjectStatusResponse(RecordResponse):
    name: str
    description: str | None = None
    color: str | None = None


# =============================================================================
# Location type
# =============================================================================


class LocationTypeCreate(StrictCamelModel):
    name: str = Field(min_length=1)
    description: str | None = None


class LocationTypeUpdate(StrictCamelModel):
    name: PatchNonEmptyStr = None
    description: str | None = None


class LocationTypeResponse(RecordResponse):
    name: str
    description: str | None = None


# =============================================================================
# Location
# =============================================================================


class LocationManagerEntry(StrictCamelModel):
    """One manager assigned to a location, with the code they use on site."""

    manager: str = Field(min_length=1)
    code: str = Field(min_length=1)


class LocationCreate(StrictCamelModel):
    name: str = Field(min_length=1)
    address: str = Field(min_length=1)
    city: str = Field(min_length=1)
    nation: str = Field(min_length=1)
    province: str = Field(min_length=1)
    region: str = Field(min_length=1)
    location_type: str = Field(min_length=1)
    custom_id: str | None = None
    description: str | None = None
    latitude: str | None = None
    longitude: str | None = None
    map: str | None = None
    street: str | None = None
    owner: str | None = None
    location_managers: list[LocationManagerEntry] = Field(default_factory=list)
    is_near_another_location: bool = False


class LocationUpdate(StrictCamelModel):
    name: PatchNonEmptyStr = None
    address: PatchNonEmptyStr = None
    city: PatchNonEmptyStr = None
    nation: PatchNonEmptyStr = None
    province: PatchNonEmptyStr = None
    region: PatchNonEmptyStr = None
    location_type: PatchNonEmptyStr = None
    custom_id: str | None = None
    description: str | None = None
    latitude: str | None = None
    longitude: str | None = None
    map: str | None = None
    street: str | None = None
    owner: str | None = None
    location_managers: Annotated[
        list[LocationManagerEntry] | None, _reject_null("an array")
    ] = None
    is_near_another_location: PatchBool = None


class LocationResponse(RecordResponse):
    custom_id: str | None = None
    name: str
    address: str
    city: str
    description: str | None = None
    latitude: str | None = None
    longitude: str | None = None
    map: str | None = None
    nation: str
    street: str | None = None
    owner: str | None = None
    province: str
    region: str
    image: str | None = None
    location_managers: list[LocationManagerEntry] = Field(default_factory=list)
    location_type: str
    is_near_another_location: bool


# =============================================================================
# Project
# =============================================================================


class ProjectCreate(StrictCamelModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    customer: str = Field(min_length=1)
    location: str = Field(min_length=1)
    project_manager: str = Field(min_length=1)
    type: str = Field(min_length=1)
    task: str = Field(min_length=1)
    order_number: str = Field(min_length=1)
    assignment_date: datetime
    scheda_radio_date: datetime


class ProjectUpdate(StrictCamelModel):
    title: PatchNonEmptyStr = None
    description: PatchNonEmptyStr = None
    custom_id: str | None = None
    prev_custom_id: str | None = None
    customer: PatchNonEmptyStr = None
    location: PatchNonEmptyStr = None
    admin: str | None = None
    # Older clients send the project manager as "manager"
    project_manager: PatchNonEmptyStr = Field(
        default=None,
        validation_alias=AliasChoices("projectManager", "manager", "project_manager"),
    )
    status: str | None = None
    type: PatchNonEmptyStr = None
    task: PatchNonEmptyStr = None
    order_number: PatchNonEmptyStr = None
    assignment_date: PatchDatetime = None
    scheda_radio_date: PatchDatetime = None
    status_history: PatchStrList = None
    is_active: PatchBool = None
    is_deleted: PatchBool = None


class ProjectResponse(RecordResponse):
    custom_id: str | None = None
    prev_custom_id: str | None = None
    title: str
    description: str
    customer: str
    location: str
    project_manager: str
    admin: str | None = None
    status: str | None = None
    type: str
    task: str
    order_number: str
    assignment_date: datetime
    scheda_radio_date: datetime
    status_history: list[str] = Field(default_factory=list)
    is_active: bool
    is_deleted: bool


# =============================================================================
# Health
# =============================================================================


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str


class PoolStatusResponse(BaseModel):
    """Connection pool status for detailed health check."""

    pool_size: int
    checked_out: int
    overflow: int
    checked_in: int


class DetailedHealthResponse(BaseModel):
    """Detailed health check response with component status."""

    status: str
    service: str
    database: bool
    pool: PoolStatusResponse | None = None
