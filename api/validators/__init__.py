"""Request validators (the middleware step between router and service)."""

from validators.base import PresenceValidator, SchemaValidator, first_error_message

__all__ = ["PresenceValidator", "SchemaValidator", "first_error_message"]
