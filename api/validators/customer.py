from validators.base import PresenceValidator

customer_validator = PresenceValidator(
    entity="Customer",
    required=("email", "name", "password"),
    updatable=("email", "name", "password", "isActive", "isDeleted"),
)
