from schemas import LocationTypeCreate, LocationTypeUpdate
from validators.base import SchemaValidator

location_type_validator = SchemaValidator(
    entity="LocationType",
    create_schema=LocationTypeCreate,
    update_schema=LocationTypeUpdate,
)
