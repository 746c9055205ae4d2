from repositories.project_status_repository import ProjectStatusRepository
from schemas import ProjectStatusCreate, ProjectStatusResponse, ProjectStatusUpdate
from services.base import CrudService


class ProjectStatusService(CrudService):
    repository_class = ProjectStatusRepository
    response_schema = ProjectStatusResponse
    create_schema = ProjectStatusCreate
    update_schema = ProjectStatusUpdate
    singular = "Project status"
    plural = "Project statuses"


project_status_service = ProjectStatusService()
