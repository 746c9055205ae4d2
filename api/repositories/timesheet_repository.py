"""Timesheet repository for database operations."""

from models import Timesheet
from repositories.base import CrudRepository


class TimesheetRepository(CrudRepository[Timesheet]):
    """Repository for Timesheet database operations.

    Search matches the attached file name. Deletes are physical.
    """

    model = Timesheet
    entity_name = "Timesheet"
    search_field = "file"
    soft_delete = False
