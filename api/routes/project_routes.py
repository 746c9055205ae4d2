"""Project endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.auth import require_auth
from core.database import DbSession
from core.pagination import PaginationParams, SearchTerm
from schemas import ProjectCreate, ProjectUpdate
from services.project_service import project_service
from validators.project import project_validator

router = APIRouter(
    prefix="/api/projects",
    tags=["projects"],
    dependencies=[Depends(require_auth)],
    responses={401: {"description": "Not authenticated"}},
)

CreateProjectBody = Annotated[
    ProjectCreate, Depends(project_validator.validate_create)
]
UpdateProjectBody = Annotated[
    ProjectUpdate, Depends(project_validator.validate_update)
]


@router.get("")
async def list_projects(
    db: DbSession, pagination: PaginationParams, search: SearchTerm
) -> JSONResponse:
    """Page through projects. ``search`` filters on the project title."""
    return await project_service.list(db, pagination, search)


@router.get("/{project_id}")
async def get_project(project_id: str, db: DbSession) -> JSONResponse:
    return await project_service.get(db, project_id)


@router.post("", status_code=201)
async def create_project(body: CreateProjectBody, db: DbSession) -> JSONResponse:
    return await project_service.create(db, body)


@router.patch("/{project_id}")
async def update_project(
    project_id: str, body: UpdateProjectBody, db: DbSession
) -> JSONResponse:
    return await project_service.update(db, project_id, body)


@router.delete("/{project_id}")
async def delete_project(project_id: str, db: DbSession) -> JSONResponse:
    return await project_service.delete(db, project_id)
