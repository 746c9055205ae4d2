"""Customer endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.database import DbSession
from core.pagination import PaginationParams, SearchTerm
from services.customer_service import customer_service
from validators.customer import customer_validator

router = APIRouter(prefix="/api/customers", tags=["customers"])

CreateCustomerBody = Annotated[
    dict[str, Any], Depends(customer_validator.validate_create)
]
UpdateCustomerBody = Annotated[
    dict[str, Any], Depends(customer_validator.validate_update)
]


@router.get("")
async def list_customers(
    db: DbSession, pagination: PaginationParams, search: SearchTerm
) -> JSONResponse:
    """Page through customers. ``search`` filters on the customer name."""
    return await customer_service.list(db, pagination, search)


@router.get("/{customer_id}")
async def get_customer(customer_id: str, db: DbSession) -> JSONResponse:
    return await customer_service.get(db, customer_id)


@router.post("", status_code=201)
async def create_customer(body: CreateCustomerBody, db: DbSession) -> JSONResponse:
    return await customer_service.create(db, body)


@router.patch("/{customer_id}")
async def update_customer(
    customer_id: str, body: UpdateCustomerBody, db: DbSession
) -> JSONResponse:
    return await customer_service.update(db, customer_id, body)


@router.delete("/{customer_id}")
async def delete_customer(customer_id: str, db: DbSession) -> JSONResponse:
    return await customer_service.delete(db, customer_id)
