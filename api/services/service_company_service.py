from repositories.service_company_repository import ServiceCompanyRepository
from schemas import ServiceCompanyCreate, ServiceCompanyResponse, ServiceCompanyUpdate
from services.base import CrudService


class ServiceCompanyService(CrudService):
    repository_class = ServiceCompanyRepository
    response_schema = ServiceCompanyResponse
    create_schema = ServiceCompanyCreate
    update_schema = ServiceCompanyUpdate
    singular = "Service company"
    plural = "Service companies"


service_company_service = ServiceCompanyService()
