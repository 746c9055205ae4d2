"""Service company endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.database import DbSession
from core.pagination import PaginationParams, SearchTerm
from services.service_company_service import service_company_service
from validators.service_company import service_company_validator

router = APIRouter(prefix="/api/service-companies", tags=["service-companies"])

CreateServiceCompanyBody = Annotated[
    dict[str, Any], Depends(service_company_validator.validate_create)
]
UpdateServiceCompanyBody = Annotated[
    dict[str, Any], Depends(service_company_validator.validate_update)
]


@router.get("")
async def list_service_companies(
    db: DbSession, pagination: PaginationParams, search: SearchTerm
) -> JSONResponse:
    """Page through service companies. ``search`` filters on the company name."""
    return await service_company_service.list(db, pagination, search)


@router.get("/{service_company_id}")
async def get_service_company(service_company_id: str, db: DbSession) -> JSONResponse:
    return await service_company_service.get(db, service_company_id)


@router.post("", status_code=201)
async def create_service_company(
    body: CreateServiceCompanyBody, db: DbSession
) -> JSONResponse:
    return await service_company_service.create(db, body)


@router.patch("/{service_company_id}")
async def update_service_company(
    service_company_id: str, body: UpdateServiceCompanyBody, db: DbSession
) -> JSONResponse:
    return await service_company_service.update(db, service_company_id, body)


@router.delete("/{service_company_id}")
async def delete_service_company(
    service_company_id: str, db: DbSession
) -> JSONResponse:
    return await service_company_service.delete(db, service_company_id)
