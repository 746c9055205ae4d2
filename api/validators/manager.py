from validators.base import PresenceValidator

manager_validator = PresenceValidator(
    entity="Manager",
    required=("name", "email"),
    updatable=("name", "email", "phone", "admin", "isActive", "isDeleted"),
)
