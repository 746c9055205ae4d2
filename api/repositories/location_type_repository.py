"""Location type repository for database operations."""

from models import LocationType
from repositories.base import CrudRepository


class LocationTypeRepository(CrudRepository[LocationType]):
    model = LocationType
    entity_name = "Location type"
    search_field = "name"
    soft_delete = False
