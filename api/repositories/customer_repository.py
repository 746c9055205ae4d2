"""Customer repository for database operations."""

from sqlalchemy import select

from models import Customer
from repositories.base import CrudRepository


class CustomerRepository(CrudRepository[Customer]):
    """Repository for Customer database operations. Deletes are soft."""

    model = Customer
    entity_name = "Customer"
    search_field = "name"
    soft_delete = True

    async def get_by_email(self, email: str) -> Customer | None:
        """Live customer with this exact email, or None."""
        result = await self.db.execute(
            select(Customer).where(
                Customer.email == email, Customer.is_deleted.is_(False)
            )
        )
        return result.scalar_one_or_none()
