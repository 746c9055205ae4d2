from schemas import ProjectCreate, ProjectUpdate
from validators.base import SchemaValidator

project_validator = SchemaValidator(
    entity="Project",
    create_schema=ProjectCreate,
    update_schema=ProjectUpdate,
)
