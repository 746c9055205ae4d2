"""Repository layer for database operations.

Repositories encapsulate all database queries, keeping services free of
SQL. Each entity gets a CrudRepository subclass that picks its model,
search column and delete policy.
"""

from repositories.base import CrudRepository, Page
from repositories.customer_repository import CustomerRepository
from repositories.location_repository import LocationRepository
from repositories.location_type_repository import LocationTypeRepository
from repositories.manager_repository import ManagerRepository
from repositories.project_repository import ProjectRepository
from repositories.project_status_repository import ProjectStatusRepository
from repositories.service_company_repository import ServiceCompanyRepository
from repositories.timesheet_repository import TimesheetRepository
from repositories.utils import logged_operation

__all__ = [
    "CrudRepository",
    "CustomerRepository",
    "LocationRepository",
    "LocationTypeRepository",
    "ManagerRepository",
    "Page",
    "ProjectRepository",
    "ProjectStatusRepository",
    "ServiceCompanyRepository",
    "TimesheetRepository",
    "logged_operation",
]
