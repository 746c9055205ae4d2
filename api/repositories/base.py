"""Generic CRUD repository shared by every entity.

Subclasses pick the model, the text column used for search and the delete
policy. Soft-delete repositories never see rows flagged ``is_deleted``.
"""

from typing import Any, ClassVar, Generic, TypedDict, TypeVar

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import Base
from core.exceptions import NotFoundError
from core.pagination import Pagination, total_pages
from repositories.utils import logged_operation

ModelT = TypeVar("ModelT", bound=Base)


class Page(TypedDict, Generic[ModelT]):
    data: list[ModelT]
    total_count: int
    current_page: int
    total_pages: int


class CrudRepository(Generic[ModelT]):
    """list / get_by_id / create / update / delete for one table."""

    model: ClassVar[type[Base]]
    entity_name: ClassVar[str]
    search_field: ClassVar[str] = "name"
    soft_delete: ClassVar[bool] = False

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def _live_conditions(self) -> list[ColumnElement[bool]]:
        if self.soft_delete:
            return [self.model.is_deleted.is_(False)]
        return []

    def _apply(self, query: Select, conditions: list[ColumnElement[bool]]) -> Select:
        for condition in conditions:
            query = query.where(condition)
        return query

    async def _find_live(self, entity_id: str) -> ModelT | None:
        query = self._apply(
            select(self.model).where(self.model.id == entity_id),
            self._live_conditions(),
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    @logged_operation("list")
    async def list(self, pagination: Pagination, search: str = "") -> Page[ModelT]:
        """Page through live rows, oldest first.

        ``search`` is matched literally and case-insensitively anywhere in
        ``search_field``.
        """
        conditions = self._live_conditions()
        if search:
            column = getattr(self.model, self.search_field)
            conditions.append(column.icontains(search, autoescape=True))

        count_query = self._apply(
            select(func.count()).select_from(self.model), conditions
        )
        total_count = (await self.db.execute(count_query)).scalar_one()

        query = (
            self._apply(select(self.model), conditions)
            .order_by(self.model.created_at, self.model.id)
            .offset(pagination.offset)
            .limit(pagination.limit)
        )
        result = await self.db.execute(query)

        return Page(
            data=list(result.scalars().all()),
            total_count=total_count,
            current_page=pagination.page,
            total_pages=total_pages(total_count, pagination.limit),
        )

    @logged_operation("get_by_id")
    async def get_by_id(self, entity_id: str) -> ModelT:
        record = await self._find_live(entity_id)
        if record is None:
            raise NotFoundError(self.entity_name, entity_id)
        return record

    @logged_operation("create")
    async def create(self, fields: dict[str, Any]) -> ModelT:
        record = self.model(**fields)
        self.db.add(record)
        await self.db.flush()
        await self.db.refresh(record)
        return record

    @logged_operation("update")
    async def update(self, entity_id: str, fields: dict[str, Any]) -> ModelT:
        """Apply a partial update. Last writer wins."""
        record = await self._find_live(entity_id)
        if record is None:
            raise NotFoundError(self.entity_name, entity_id, action="update")

        for key, value in fields.items():
            setattr(record, key, value)
        await self.db.flush()
        await self.db.refresh(record)
        return record

    @logged_operation("delete")
    async def delete(self, entity_id: str) -> ModelT:
        """Soft-delete (flag) or hard-delete (remove) depending on the entity."""
        record = await self._find_live(entity_id)
        if record is None:
            raise NotFoundError(self.entity_name, entity_id, action="delete")

        if self.soft_delete:
            record.is_deleted = True
            await self.db.flush()
            await self.db.refresh(record)
        else:
            await self.db.delete(record)
            await self.db.flush()
        return record
