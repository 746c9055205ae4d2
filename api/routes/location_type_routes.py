"""Location type endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.auth import require_auth
from core.database import DbSession
from core.pagination import PaginationParams, SearchTerm
from schemas import LocationTypeCreate, LocationTypeUpdate
from services.location_type_service import location_type_service
from validators.location_type import location_type_validator

router = APIRouter(
    prefix="/api/location-types",
    tags=["location-types"],
    dependencies=[Depends(require_auth)],
    responses={401: {"description": "Not authenticated"}},
)

CreateLocationTypeBody = Annotated[
    LocationTypeCreate, Depends(location_type_validator.validate_create)
]
UpdateLocationTypeBody = Annotated[
    LocationTypeUpdate, Depends(location_type_validator.validate_update)
]


@router.get("")
async def list_location_types(
    db: DbSession, pagination: PaginationParams, search: SearchTerm
) -> JSONResponse:
    """Page through location types. ``search`` filters on the type name."""
    return await location_type_service.list(db, pagination, search)


@router.get("/{location_type_id}")
async def get_location_type(location_type_id: str, db: DbSession) -> JSONResponse:
    return await location_type_service.get(db, location_type_id)


@router.post("", status_code=201)
async def create_location_type(
    body: CreateLocationTypeBody, db: DbSession
) -> JSONResponse:
    return await location_type_service.create(db, body)


@router.patch("/{location_type_id}")
async def update_location_type(
    location_type_id: str, body: UpdateLocationTypeBody, db: DbSession
) -> JSONResponse:
    return await location_type_service.update(db, location_type_id, body)


@router.delete("/{location_type_id}")
async def delete_location_type(location_type_id: str, db: DbSession) -> JSONResponse:
    return await location_type_service.delete(db, location_type_id)
