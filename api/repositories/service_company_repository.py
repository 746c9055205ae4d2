"""Service company repository for database operations."""

from models import ServiceCompany
from repositories.base import CrudRepository


class ServiceCompanyRepository(CrudRepository[ServiceCompany]):
    """Service companies carry is_deleted but are removed physically."""

    model = ServiceCompany
    entity_name = "Service company"
    search_field = "name"
    soft_delete = False
