"""Manager endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.auth import require_auth
from core.database import DbSession
from core.pagination import PaginationParams, SearchTerm
from services.manager_service import manager_service
from validators.manager import manager_validator

router = APIRouter(
    prefix="/api/managers",
    tags=["managers"],
    dependencies=[Depends(require_auth)],
    responses={401: {"description": "Not authenticated"}},
)

CreateManagerBody = Annotated[
    dict[str, Any], Depends(manager_validator.validate_create)
]
UpdateManagerBody = Annotated[
    dict[str, Any], Depends(manager_validator.validate_update)
]


@router.get("")
async def list_managers(
    db: DbSession, pagination: PaginationParams, search: SearchTerm
) -> JSONResponse:
    """Page through managers. ``search`` filters on the manager name."""
    return await manager_service.list(db, pagination, search)


@router.get("/{manager_id}")
async def get_manager(manager_id: str, db: DbSession) -> JSONResponse:
    return await manager_service.get(db, manager_id)


@router.post("", status_code=201)
async def create_manager(body: CreateManagerBody, db: DbSession) -> JSONResponse:
    return await manager_service.create(db, body)


@router.patch("/{manager_id}")
async def update_manager(
    manager_id: str, body: UpdateManagerBody, db: DbSession
) -> JSONResponse:
    return await manager_service.update(db, manager_id, body)


@router.delete("/{manager_id}")
async def delete_manager(manager_id: str, db: DbSession) -> JSONResponse:
    return await manager_service.delete(db, manager_id)
