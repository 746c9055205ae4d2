"""Project repository for database operations."""

from models import Project
from repositories.base import CrudRepository


class ProjectRepository(CrudRepository[Project]):
    """Repository for Project database operations.

    Search matches the project title. Deletes are soft.
    """

    model = Project
    entity_name = "Project"
    search_field = "title"
    soft_delete = True
