"""API route modules."""

from .customer_routes import router as customers_router
from .health_routes import router as health_router
from .location_routes import router as locations_router
from .location_type_routes import router as location_types_router
from .manager_routes import router as managers_router
from .project_routes import router as projects_router
from .project_status_routes import router as project_statuses_router
from .service_company_routes import router as service_companies_router
from .timesheet_routes import router as timesheets_router

__all__ = [
    "customers_router",
    "health_router",
    "location_types_router",
    "locations_router",
    "managers_router",
    "project_statuses_router",
    "projects_router",
    "service_companies_router",
    "timesheets_router",
]
