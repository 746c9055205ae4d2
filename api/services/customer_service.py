"""Customer service. Passwords are hashed before they reach the repository."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from core.auth import hash_password
from core.exceptions import ValidationError
from repositories.customer_repository import CustomerRepository
from schemas import CustomerCreate, CustomerResponse, CustomerUpdate
from services.base import CrudService
from validators.base import is_blank


class CustomerService(CrudService):
    repository_class = CustomerRepository
    response_schema = CustomerResponse
    create_schema = CustomerCreate
    update_schema = CustomerUpdate
    singular = "Customer"
    plural = "Customers"

    async def _ensure_email_free(
        self, db: AsyncSession, email: str, entity_id: str | None = None
    ) -> None:
        existing = await CustomerRepository(db).get_by_email(email)
        if existing is not None and existing.id != entity_id:
            raise ValidationError("Email is already registered")

    async def prepare_create(
        self, db: AsyncSession, fields: dict[str, Any]
    ) -> dict[str, Any]:
        await self._ensure_email_free(db, fields["email"])
        fields["password"] = hash_password(fields["password"])
        return fields

    async def prepare_update(
        self, db: AsyncSession, entity_id: str, fields: dict[str, Any]
    ) -> dict[str, Any]:
        if fields.get("email"):
            await self._ensure_email_free(db, fields["email"], entity_id)
        if "password" in fields:
            if is_blank(fields["password"]):
                raise ValidationError("Password must not be empty")
            fields["password"] = hash_password(fields["password"])
        return fields


customer_service = CustomerService()
