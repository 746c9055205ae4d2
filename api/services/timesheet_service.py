from repositories.timesheet_repository import TimesheetRepository
from schemas import TimesheetCreate, TimesheetResponse, TimesheetUpdate
from services.base import CrudService


class TimesheetService(CrudService):
    repository_class = TimesheetRepository
    response_schema = TimesheetResponse
    create_schema = TimesheetCreate
    update_schema = TimesheetUpdate
    singular = "Timesheet"
    plural = "Timesheets"


timesheet_service = TimesheetService()
