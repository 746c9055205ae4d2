from repositories.project_repository import ProjectRepository
from schemas import ProjectCreate, ProjectResponse, ProjectUpdate
from services.base import CrudService


class ProjectService(CrudService):
    repository_class = ProjectRepository
    response_schema = ProjectResponse
    create_schema = ProjectCreate
    update_schema = ProjectUpdate
    singular = "Project"
    plural = "Projects"


project_service = ProjectService()
