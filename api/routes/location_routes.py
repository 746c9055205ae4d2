"""Location endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import JSONResponse

from core.auth import require_auth
from core.database import DbSession
from core.pagination import PaginationParams, SearchTerm
from core.ratelimit import limiter
from schemas import LocationCreate, LocationUpdate
from services.location_service import location_service
from validators.location import location_validator

router = APIRouter(
    prefix="/api/locations",
    tags=["locations"],
    dependencies=[Depends(require_auth)],
    responses={401: {"description": "Not authenticated"}},
)

CreateLocationBody = Annotated[
    LocationCreate, Depends(location_validator.validate_create)
]
UpdateLocationBody = Annotated[
    LocationUpdate, Depends(location_validator.validate_update)
]


@router.get("")
async def list_locations(
    db: DbSession, pagination: PaginationParams, search: SearchTerm
) -> JSONResponse:
    """Page through locations. ``search`` filters on the location name."""
    return await location_service.list(db, pagination, search)


@router.get("/{location_id}")
async def get_location(location_id: str, db: DbSession) -> JSONResponse:
    return await location_service.get(db, location_id)


@router.post("", status_code=201)
async def create_location(body: CreateLocationBody, db: DbSession) -> JSONResponse:
    return await location_service.create(db, body)


@router.patch("/{location_id}")
async def update_location(
    location_id: str, body: UpdateLocationBody, db: DbSession
) -> JSONResponse:
    return await location_service.update(db, location_id, body)


@router.delete("/{location_id}")
async def delete_location(location_id: str, db: DbSession) -> JSONResponse:
    return await location_service.delete(db, location_id)


@router.post("/{location_id}/image")
@limiter.limit("10/minute")
async def upload_location_image(
    request: Request,
    location_id: str,
    db: DbSession,
    image: Annotated[UploadFile | None, File()] = None,
) -> JSONResponse:
    """Attach a site picture (multipart field ``image``) to the location."""
    return await location_service.upload_image(db, location_id, image)
