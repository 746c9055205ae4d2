from validators.base import PresenceValidator

# hoursSpent and date are optional on create; review flags arrive on update.
timesheet_validator = PresenceValidator(
    entity="Timesheet",
    required=("activity", "worker", "manager", "startTime", "endTime", "file"),
    updatable=(
        "activity",
        "worker",
        "manager",
        "startTime",
        "endTime",
        "hoursSpent",
        "date",
        "file",
        "isPending",
        "isRejected",
        "isAccepted",
        "isResubmitted",
        "rejectionReason",
    ),
)
