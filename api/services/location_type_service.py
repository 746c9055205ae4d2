from repositories.location_type_repository import LocationTypeRepository
from schemas import LocationTypeCreate, LocationTypeResponse, LocationTypeUpdate
from services.base import CrudService


class LocationTypeService(CrudService):
    repository_class = LocationTypeRepository
    response_schema = LocationTypeResponse
    create_schema = LocationTypeCreate
    update_schema = LocationTypeUpdate
    singular = "Location type"
    plural = "Location types"


location_type_service = LocationTypeService()
