"""Request validators run as FastAPI dependencies before the service call.

Two styles are in use:

* ``PresenceValidator`` - ad-hoc checks on named body fields. Create needs
  every required field; update needs at least one updatable field.
* ``SchemaValidator`` - the body is parsed against a pydantic contract that
  rejects unknown keys; the first violated rule becomes the message.

Both raise ``core.exceptions.ValidationError`` (400). Anything else that
goes wrong inside a validator is logged and re-raised as ``UnexpectedError``
(500).
"""

import json
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import AppError, UnexpectedError, ValidationError
from core.logger import get_logger

logger = get_logger(__name__)

CreateT = TypeVar("CreateT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=BaseModel)
SchemaT = TypeVar("SchemaT", bound=BaseModel)


def first_error_message(exc: PydanticValidationError) -> str:
    """Render the first pydantic error the way clients expect: '"name" is required'."""
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"]) or "body"
    match error["type"]:
        case "missing":
            return f'"{field}" is required'
        case "extra_forbidden":
            return f'"{field}" is not allowed'
        case "string_too_short":
            return f'"{field}" is not allowed to be empty'
        case _:
            msg = error["msg"]
            return f'"{field}" {msg[:1].lower()}{msg[1:]}'


def join_labels(fields: Sequence[str], conjunction: str) -> str:
    """["email", "name", "password"] -> "Email, Name, and Password"."""
    labels = [field[:1].upper() + field[1:] for field in fields]
    if len(labels) == 1:
        return labels[0]
    if len(labels) == 2:
        return f"{labels[0]} {conjunction} {labels[1]}"
    return f"{', '.join(labels[:-1])}, {conjunction} {labels[-1]}"


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


async def read_json_body(request: Request) -> dict[str, Any]:
    """Request body as a dict. An empty body reads as ``{}``."""
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError("Request body must be valid JSON") from e
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


@contextmanager
def guarded(entity: str, operation: str) -> Iterator[None]:
    """Let validation errors through; turn anything else into a 500."""
    try:
        yield
    except AppError:
        raise
    except Exception as e:
        logger.exception(
            "validator.unexpected_error",
            label=f"Middleware-{entity}{operation}",
            error=str(e),
            error_type=type(e).__name__,
        )
        raise UnexpectedError(str(e)) from e


class PresenceValidator:
    """Field-presence checks on the raw JSON body."""

    def __init__(
        self,
        entity: str,
        required: Sequence[str],
        updatable: Sequence[str],
    ) -> None:
        self.entity = entity
        self.required = tuple(required)
        self.updatable = tuple(updatable)
        self.create_message = f"{join_labels(self.required, 'and')} must be provided"
        self.update_message = (
            f"At least one of {join_labels(self.updatable, 'or')} must be provided"
        )

    async def validate_create(self, request: Request) -> dict[str, Any]:
        with guarded(self.entity, "Create"):
            body = await read_json_body(request)
            if any(is_blank(body.get(field)) for field in self.required):
                raise ValidationError(self.create_message)
            return body

    async def validate_update(self, request: Request) -> dict[str, Any]:
        with guarded(self.entity, "Update"):
            body = await read_json_body(request)
            if all(is_blank(body.get(field)) for field in self.updatable):
                raise ValidationError(self.update_message)
            return body


class SchemaValidator(Generic[CreateT, UpdateT]):
    """Declarative body contract backed by pydantic models."""

    def __init__(
        self,
        entity: str,
        create_schema: type[CreateT],
        update_schema: type[UpdateT],
    ) -> None:
        self.entity = entity
        self.create_schema = create_schema
        self.update_schema = update_schema

    @staticmethod
    def _parse(
        schema: type[SchemaT], body: dict[str, Any]
    ) -> SchemaT:
        try:
            return schema.model_validate(body)
        except PydanticValidationError as e:
            raise ValidationError(first_error_message(e)) from e

    async def validate_create(self, request: Request) -> CreateT:
        with guarded(self.entity, "Create"):
            return self._parse(self.create_schema, await read_json_body(request))

    async def validate_update(self, request: Request) -> UpdateT:
        with guarded(self.entity, "Update"):
            return self._parse(self.update_schema, await read_json_body(request))
