"""Generic CRUD service.

A service turns one repository call into a response envelope. Failures
never propagate: they are logged under ``<Entity>Service-<op>``, the
transaction is rolled back and an error envelope is returned instead.
"""

from typing import Any, ClassVar

from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from core import get_logger
from core.exceptions import ValidationError
from core.pagination import Pagination
from core.responses import send_array_formatted, send_error, send_formatted
from repositories.base import CrudRepository
from repositories.utils import operation_label
from schemas import RecordResponse
from validators.base import first_error_message

logger = get_logger(__name__)


class CrudService:
    """list / get / create / update / delete returning JSON envelopes."""

    repository_class: ClassVar[type[CrudRepository]]
    response_schema: ClassVar[type[RecordResponse]]
    create_schema: ClassVar[type[BaseModel]]
    update_schema: ClassVar[type[BaseModel]]
    # "Customer" / "Customers" as used in response messages
    singular: ClassVar[str]
    plural: ClassVar[str]

    def serialize(self, record: Any) -> dict[str, Any]:
        return self.response_schema.model_validate(record).model_dump(
            mode="json", by_alias=True
        )

    def _fields(
        self, schema: type[BaseModel], payload: BaseModel | dict[str, Any]
    ) -> dict[str, Any]:
        """Attribute dict holding only the keys the client actually sent."""
        if isinstance(payload, dict):
            try:
                payload = schema.model_validate(payload)
            except PydanticValidationError as e:
                raise ValidationError(first_error_message(e)) from e
        return payload.model_dump(exclude_unset=True)

    async def prepare_create(
        self, db: AsyncSession, fields: dict[str, Any]
    ) -> dict[str, Any]:
        return fields

    async def prepare_update(
        self, db: AsyncSession, entity_id: str, fields: dict[str, Any]
    ) -> dict[str, Any]:
        return fields

    async def _fail(
        self, db: AsyncSession, operation: str, error: Exception, message: str
    ) -> JSONResponse:
        logger.error(
            "service.operation.failed",
            label=operation_label(self, operation),
            error=str(error),
            error_type=type(error).__name__,
        )
        await db.rollback()
        return send_error(error, message)

    async def list(
        self, db: AsyncSession, pagination: Pagination, search: str = ""
    ) -> JSONResponse:
        try:
            page = await self.repository_class(db).list(pagination, search)
            return send_array_formatted(
                {**page, "data": [self.serialize(r) for r in page["data"]]},
                f"{self.plural} retrieved successfully",
            )
        except Exception as e:
            return await self._fail(db, "list", e, f"{self.plural} retrieval failed")

    async def get(self, db: AsyncSession, entity_id: str) -> JSONResponse:
        try:
            record = await self.repository_class(db).get_by_id(entity_id)
            return send_formatted(
                self.serialize(record), f"{self.singular} retrieved successfully"
            )
        except Exception as e:
            return await self._fail(db, "get", e, f"{self.singular} retrieval failed")

    async def create(
        self, db: AsyncSession, payload: BaseModel | dict[str, Any]
    ) -> JSONResponse:
        try:
            fields = await self.prepare_create(
                db, self._fields(self.create_schema, payload)
            )
            record = await self.repository_class(db).create(fields)
            return send_formatted(
                self.serialize(record),
                f"{self.singular} created successfully",
                status_code=201,
            )
        except Exception as e:
            return await self._fail(
                db, "create", e, f"{self.singular} creation failed"
            )

    async def update(
        self, db: AsyncSession, entity_id: str, payload: BaseModel | dict[str, Any]
    ) -> JSONResponse:
        try:
            fields = await self.prepare_update(
                db, entity_id, self._fields(self.update_schema, payload)
            )
            record = await self.repository_class(db).update(entity_id, fields)
            return send_formatted(
                self.serialize(record), f"{self.singular} updated successfully"
            )
        except Exception as e:
            return await self._fail(db, "update", e, f"{self.singular} update failed")

    async def delete(self, db: AsyncSession, entity_id: str) -> JSONResponse:
        try:
            record = await self.repository_class(db).delete(entity_id)
            return send_formatted(
                self.serialize(record), f"{self.singular} deleted successfully"
            )
        except Exception as e:
            return await self._fail(
                db, "delete", e, f"{self.singular} deletion failed"
            )
