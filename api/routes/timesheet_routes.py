"""Timesheet endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.database import DbSession
from core.pagination import PaginationParams, SearchTerm
from services.timesheet_service import timesheet_service
from validators.timesheet import timesheet_validator

router = APIRouter(prefix="/api/timesheets", tags=["timesheets"])

CreateTimesheetBody = Annotated[
    dict[str, Any], Depends(timesheet_validator.validate_create)
]
UpdateTimesheetBody = Annotated[
    dict[str, Any], Depends(timesheet_validator.validate_update)
]


@router.get("")
async def list_timesheets(
    db: DbSession, pagination: PaginationParams, search: SearchTerm
) -> JSONResponse:
    """Page through timesheets. ``search`` filters on the attached file name."""
    return await timesheet_service.list(db, pagination, search)


@router.get("/{timesheet_id}")
async def get_timesheet(timesheet_id: str, db: DbSession) -> JSONResponse:
    return await timesheet_service.get(db, timesheet_id)


@router.post("", status_code=201)
async def create_timesheet(body: CreateTimesheetBody, db: DbSession) -> JSONResponse:
    return await timesheet_service.create(db, body)


@router.patch("/{timesheet_id}")
async def update_timesheet(
    timesheet_id: str, body: UpdateTimesheetBody, db: DbSession
) -> JSONResponse:
    return await timesheet_service.update(db, timesheet_id, body)


@router.delete("/{timesheet_id}")
async def delete_timesheet(timesheet_id: str, db: DbSession) -> JSONResponse:
    return await timesheet_service.delete(db, timesheet_id)
