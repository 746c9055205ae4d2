"""Unit tests for the request validators.

Covers both styles: ad-hoc presence checks (Customer, Timesheet, ...) and the
declarative pydantic contracts (Project, Location, ...).
"""

import json
from unittest.mock import patch

import pytest
from fastapi import Request

from core.exceptions import UnexpectedError, ValidationError
from schemas import (
    CustomerUpdate,
    LocationCreate,
    ProjectCreate,
    ProjectUpdate,
    TimesheetUpdate,
)
from validators.base import first_error_message, join_labels
from validators.customer import customer_validator
from validators.location import location_validator
from validators.project import project_validator
from validators.project_status import project_status_validator
from validators.timesheet import timesheet_validator


def _request(body: bytes | dict | list | None) -> Request:
    """Build a real Starlette request whose body is ``body``."""
    if body is None:
        raw = b""
    elif isinstance(body, bytes):
        raw = body
    else:
        raw = json.dumps(body).encode()

    async def receive():
        return {"type": "http.request", "body": raw, "more_body": False}

    scope = {
        "type": "http",
        "method": "POST",
        "path": "/",
        "headers": [(b"content-type", b"application/json")],
    }
    return Request(scope, receive)


PROJECT_BODY = {
    "title": "Mast survey",
    "description": "Survey the mast",
    "customer": "c1",
    "location": "l1",
    "projectManager": "m1",
    "type": "survey",
    "task": "inspection",
    "orderNumber": "ORD-1",
    "assignmentDate": "2024-03-01T09:00:00Z",
    "schedaRadioDate": "2024-03-02T09:00:00Z",
}


@pytest.mark.unit
class TestJoinLabels:
    def test_single(self):
        assert join_labels(["name"], "and") == "Name"

    def test_pair(self):
        assert join_labels(["name", "address"], "or") == "Name or Address"

    def test_many(self):
        assert (
            join_labels(["email", "name", "password"], "and")
            == "Email, Name, and Password"
        )


@pytest.mark.unit
class TestPresenceValidatorCreate:
    async def test_accepts_complete_body(self):
        body = {"email": "a@b.com", "name": "A", "password": "x"}

        result = await customer_validator.validate_create(_request(body))

        assert result == body

    @pytest.mark.parametrize(
        "body",
        [
            {"email": "a@b.com", "name": "A"},
            {"email": "a@b.com", "name": "  ", "password": "x"},
            {"email": None, "name": "A", "password": "x"},
            None,
        ],
    )
    async def test_rejects_missing_field(self, body):
        with pytest.raises(ValidationError) as exc_info:
            await customer_validator.validate_create(_request(body))

        assert exc_info.value.message == "Email, Name, and Password must be provided"
        assert exc_info.value.detail.startswith("ValidationError: ")
        assert exc_info.value.status_code == 400

    async def test_timesheet_message_lists_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            await timesheet_validator.validate_create(_request({"activity": "a"}))

        assert exc_info.value.message == (
            "Activity, Worker, Manager, StartTime, EndTime, and File must be provided"
        )


@pytest.mark.unit
class TestPresenceValidatorUpdate:
    async def test_accepts_single_field(self):
        result = await customer_validator.validate_update(_request({"name": "B"}))
        assert result == {"name": "B"}

    async def test_false_boolean_counts_as_provided(self):
        result = await customer_validator.validate_update(
            _request({"isActive": False})
        )
        assert result == {"isActive": False}

    async def test_rejects_empty_update(self):
        with pytest.raises(ValidationError, match="At least one of Email"):
            await customer_validator.validate_update(_request({}))

    async def test_unknown_fields_do_not_count(self):
        with pytest.raises(ValidationError):
            await customer_validator.validate_update(_request({"colour": "red"}))

    async def test_review_flags_are_updatable(self):
        body = {"isRejected": True, "rejectionReason": ["hours do not match"]}
        assert await timesheet_validator.validate_update(_request(body)) == body


@pytest.mark.unit
class TestBodyParsing:
    async def test_invalid_json(self):
        with pytest.raises(ValidationError, match="valid JSON"):
            await customer_validator.validate_create(_request(b"{not json"))

    async def test_non_object_json(self):
        with pytest.raises(ValidationError, match="JSON object"):
            await customer_validator.validate_create(_request(["a", "b"]))


@pytest.mark.unit
class TestSchemaValidator:
    async def test_returns_model(self):
        result = await project_validator.validate_create(_request(PROJECT_BODY))

        assert isinstance(result, ProjectCreate)
        assert result.project_manager == "m1"
        assert result.order_number == "ORD-1"

    async def test_missing_field_message(self):
        body = {k: v for k, v in PROJECT_BODY.items() if k != "title"}

        with pytest.raises(ValidationError) as exc_info:
            await project_validator.validate_create(_request(body))

        assert exc_info.value.message == '"title" is required'
        assert exc_info.value.detail == 'ValidationError: "title" is required'

    async def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError, match='"colour" is not allowed'):
            await project_status_validator.validate_create(
                _request({"name": "Open", "colour": "red"})
            )

    async def test_empty_string_rejected(self):
        with pytest.raises(ValidationError, match='"name" is not allowed to be empty'):
            await project_status_validator.validate_create(_request({"name": ""}))

    async def test_type_error_message(self):
        body = {**PROJECT_BODY, "assignmentDate": "yesterday"}

        with pytest.raises(ValidationError, match='"assignmentDate"'):
            await project_validator.validate_create(_request(body))

    async def test_update_accepts_legacy_manager_key(self):
        result = await project_validator.validate_update(_request({"manager": "m9"}))

        assert isinstance(result, ProjectUpdate)
        assert result.project_manager == "m9"

    async def test_update_allows_empty_body(self):
        result = await project_validator.validate_update(_request({}))
        assert result.model_dump(exclude_unset=True) == {}

    async def test_update_rejects_null_name(self):
        with pytest.raises(ValidationError) as exc_info:
            await project_status_validator.validate_update(_request({"name": None}))

        assert exc_info.value.message == '"name" must be a string'

    async def test_update_rejects_null_legacy_manager_key(self):
        with pytest.raises(ValidationError, match='"manager" must be a string'):
            await project_validator.validate_update(_request({"manager": None}))

    async def test_update_rejects_null_history(self):
        with pytest.raises(ValidationError, match='"statusHistory" must be an array'):
            await project_validator.validate_update(
                _request({"statusHistory": None})
            )

    async def test_update_allows_null_for_nullable_columns(self):
        result = await project_validator.validate_update(
            _request({"status": None, "customId": None})
        )

        assert result.model_dump(exclude_unset=True) == {
            "status": None,
            "custom_id": None,
        }

    async def test_update_still_rejects_empty_string(self):
        with pytest.raises(ValidationError, match='"title" is not allowed to be empty'):
            await project_validator.validate_update(_request({"title": ""}))

    async def test_nested_location_manager_error(self):
        body = {
            "name": "Site",
            "address": "Via Roma 1",
            "city": "Milano",
            "nation": "Italy",
            "province": "MI",
            "region": "Lombardia",
            "locationType": "t1",
            "locationManagers": [{"manager": "m1"}],
        }

        with pytest.raises(ValidationError) as exc_info:
            await location_validator.validate_create(_request(body))

        assert exc_info.value.message == '"locationManagers.0.code" is required'

    async def test_location_create_parses(self):
        body = {
            "name": "Site",
            "address": "Via Roma 1",
            "city": "Milano",
            "nation": "Italy",
            "province": "MI",
            "region": "Lombardia",
            "locationType": "t1",
        }

        result = await location_validator.validate_create(_request(body))

        assert isinstance(result, LocationCreate)
        assert result.location_managers == []


@pytest.mark.unit
class TestUnexpectedFailures:
    async def test_crash_becomes_unexpected_error(self):
        with patch(
            "validators.base.read_json_body",
            autospec=True,
            side_effect=KeyError("boom"),
        ):
            with pytest.raises(UnexpectedError) as exc_info:
                await customer_validator.validate_create(_request({}))

        assert exc_info.value.status_code == 500
        assert isinstance(exc_info.value.__cause__, KeyError)


@pytest.mark.unit
def test_first_error_message_uses_wire_names():
    from pydantic import ValidationError as PydanticValidationError

    with pytest.raises(PydanticValidationError) as exc_info:
        ProjectCreate.model_validate({**PROJECT_BODY, "orderNumber": None})

    assert first_error_message(exc_info.value).startswith('"orderNumber"')


@pytest.mark.unit
@pytest.mark.parametrize(
    ("schema", "body", "message"),
    [
        (CustomerUpdate, {"password": None}, '"password" must be a string'),
        (CustomerUpdate, {"isActive": None}, '"isActive" must be a boolean'),
        (TimesheetUpdate, {"startTime": None}, '"startTime" must be a valid date'),
    ],
)
def test_partial_update_rejects_null(schema, body, message):
    from pydantic import ValidationError as PydanticValidationError

    with pytest.raises(PydanticValidationError) as exc_info:
        schema.model_validate(body)

    assert first_error_message(exc_info.value) == message


@pytest.mark.unit
def test_partial_update_allows_null_optional_columns():
    update = TimesheetUpdate.model_validate({"hoursSpent": None, "date": None})

    assert update.model_dump(exclude_unset=True) == {"hours_spent": None, "date": None}
