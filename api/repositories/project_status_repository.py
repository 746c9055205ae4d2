"""Project status repository for database operations."""

from models import ProjectStatus
from repositories.base import CrudRepository


class ProjectStatusRepository(CrudRepository[ProjectStatus]):
    model = ProjectStatus
    entity_name = "Project status"
    search_field = "name"
    soft_delete = False
