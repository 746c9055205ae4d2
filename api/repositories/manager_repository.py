"""Manager repository for database operations."""

from models import Manager
from repositories.base import CrudRepository


class ManagerRepository(CrudRepository[Manager]):
    """Repository for Manager database operations. Deletes are soft."""

    model = Manager
    entity_name = "Manager"
    search_field = "name"
    soft_delete = True
