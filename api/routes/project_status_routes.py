"""Project status endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.auth import require_auth
from core.database import DbSession
from core.pagination import PaginationParams, SearchTerm
from schemas import ProjectStatusCreate, ProjectStatusUpdate
from services.project_status_service import project_status_service
from validators.project_status import project_status_validator

router = APIRouter(
    prefix="/api/project-statuses",
    tags=["project-statuses"],
    dependencies=[Depends(require_auth)],
    responses={401: {"description": "Not authenticated"}},
)

CreateProjectStatusBody = Annotated[
    ProjectStatusCreate, Depends(project_status_validator.validate_create)
]
UpdateProjectStatusBody = Annotated[
    ProjectStatusUpdate, Depends(project_status_validator.validate_update)
]


@router.get("")
async def list_project_statuses(
    db: DbSession, pagination: PaginationParams, search: SearchTerm
) -> JSONResponse:
    """Page through project statuses. ``search`` filters on the status name."""
    return await project_status_service.list(db, pagination, search)


@router.get("/{project_status_id}")
async def get_project_status(project_status_id: str, db: DbSession) -> JSONResponse:
    return await project_status_service.get(db, project_status_id)


@router.post("", status_code=201)
async def create_project_status(
    body: CreateProjectStatusBody, db: DbSession
) -> JSONResponse:
    return await project_status_service.create(db, body)


@router.patch("/{project_status_id}")
async def update_project_status(
    project_status_id: str, body: UpdateProjectStatusBody, db: DbSession
) -> JSONResponse:
    return await project_status_service.update(db, project_status_id, body)


@router.delete("/{project_status_id}")
async def delete_project_status(project_status_id: str, db: DbSession) -> JSONResponse:
    return await project_status_service.delete(db, project_status_id)
