"""Location repository for database operations."""

from models import Location
from repositories.base import CrudRepository


class LocationRepository(CrudRepository[Location]):
    """Repository for Location database operations. Deletes are physical."""

    model = Location
    entity_name = "Location"
    search_field = "name"
    soft_delete = False

    async def set_image(self, location_id: str, filename: str) -> Location:
        """Point the location at a stored upload. Returns the updated row."""
        return await self.update(location_id, {"image": filename})
