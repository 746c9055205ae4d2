from validators.base import PresenceValidator

service_company_validator = PresenceValidator(
    entity="ServiceCompany",
    required=("name", "address"),
    updatable=(
        "name",
        "address",
        "description",
        "map",
        "url",
        "isActive",
        "isDeleted",
    ),
)
