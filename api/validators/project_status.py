from schemas import ProjectStatusCreate, ProjectStatusUpdate
from validators.base import SchemaValidator

project_status_validator = SchemaValidator(
    entity="ProjectStatus",
    create_schema=ProjectStatusCreate,
    update_schema=ProjectStatusUpdate,
)
