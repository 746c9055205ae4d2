from repositories.manager_repository import ManagerRepository
from schemas import ManagerCreate, ManagerResponse, ManagerUpdate
from services.base import CrudService


class ManagerService(CrudService):
    repository_class = ManagerRepository
    response_schema = ManagerResponse
    create_schema = ManagerCreate
    update_schema = ManagerUpdate
    singular = "Manager"
    plural = "Managers"


manager_service = ManagerService()
