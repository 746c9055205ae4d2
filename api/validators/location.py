from schemas import LocationCreate, LocationUpdate
from validators.base import SchemaValidator

location_validator = SchemaValidator(
    entity="Location",
    create_schema=LocationCreate,
    update_schema=LocationUpdate,
)
