"""Service tests that need the database: customer credentials and
location image uploads."""

import io
import json

import pytest
from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from core.auth import verify_password
from core.config import clear_settings_cache
from models import Customer, Location
from services.customer_service import customer_service
from services.location_service import location_service
from tests.factories import CustomerFactory, LocationFactory, create_async

pytestmark = pytest.mark.integration


def _body(response) -> dict:
    return json.loads(response.body)


class TestCustomerService:
    async def test_create_hashes_password(self, db_session: AsyncSession):
        response = await customer_service.create(
            db_session, {"email": "a@b.com", "name": "A", "password": "x"}
        )

        body = _body(response)
        assert response.status_code == 201
        assert "password" not in body["data"]
        stored = await db_session.get(Customer, body["data"]["id"])
        assert stored.password != "x"
        assert verify_password("x", stored.password)

    async def test_duplicate_email_rejected(self, db_session: AsyncSession):
        await create_async(CustomerFactory, db_session, email="dup@b.com")

        response = await customer_service.create(
            db_session, {"email": "dup@b.com", "name": "B", "password": "y"}
        )

        assert response.status_code == 400
        assert _body(response) == {
            "error": "ValidationError: Email is already registered",
            "message": "Customer creation failed",
        }

    async def test_update_rehashes_password(self, db_session: AsyncSession):
        customer = await create_async(CustomerFactory, db_session)

        await customer_service.update(db_session, customer.id, {"password": "new"})

        stored = await db_session.get(Customer, customer.id)
        assert verify_password("new", stored.password)

    @pytest.mark.parametrize("password", ["", "   "])
    async def test_update_rejects_blank_password(
        self, db_session: AsyncSession, password: str
    ):
        customer = await create_async(CustomerFactory, db_session)
        await db_session.commit()
        previous_hash = customer.password

        response = await customer_service.update(
            db_session, customer.id, {"name": "B", "password": password}
        )

        assert response.status_code == 400
        assert _body(response) == {
            "error": "ValidationError: Password must not be empty",
            "message": "Customer update failed",
        }
        stored = await db_session.get(Customer, customer.id)
        assert stored.password == previous_hash
        assert stored.name != "B"

    async def test_update_keeps_own_email(self, db_session: AsyncSession):
        customer = await create_async(CustomerFactory, db_session, email="me@b.com")

        response = await customer_service.update(
            db_session, customer.id, {"email": "me@b.com", "name": "Renamed"}
        )

        assert response.status_code == 200
        assert _body(response)["data"]["name"] == "Renamed"


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("UPLOAD_DIR", str(tmp_path))
    clear_settings_cache()
    return tmp_path


def _upload(name: str = "site.jpg", content: bytes = b"jpeg-bytes") -> UploadFile:
    return UploadFile(file=io.BytesIO(content), filename=name)


class TestLocationImageUpload:
    async def test_stores_file_and_sets_image(
        self, db_session: AsyncSession, upload_dir
    ):
        location = await create_async(LocationFactory, db_session)

        response = await location_service.upload_image(
            db_session, location.id, _upload()
        )

        body = _body(response)
        assert response.status_code == 200
        assert body["message"] == "Location image uploaded successfully"
        filename = body["data"]["image"]
        assert filename.endswith(".jpg")
        assert (upload_dir / filename).read_bytes() == b"jpeg-bytes"
        stored = await db_session.get(Location, location.id)
        assert stored.image == filename

    async def test_unknown_location_writes_nothing(
        self, db_session: AsyncSession, upload_dir
    ):
        response = await location_service.upload_image(
            db_session, "missing", _upload()
        )

        assert response.status_code == 400
        assert _body(response)["message"] == "Location image upload failed"
        assert list(upload_dir.iterdir()) == []

    async def test_missing_file_rejected(self, db_session: AsyncSession, upload_dir):
        location = await create_async(LocationFactory, db_session)

        response = await location_service.upload_image(db_session, location.id, None)

        assert _body(response)["error"] == (
            "ValidationError: Image file must be provided"
        )
