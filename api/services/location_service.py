"""Location service, including the site image upload."""

from fastapi import UploadFile
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import ValidationError
from core.responses import send_formatted
from core.uploads import save_upload
from repositories.location_repository import LocationRepository
from schemas import LocationCreate, LocationResponse, LocationUpdate
from services.base import CrudService


class LocationService(CrudService):
    repository_class = LocationRepository
    response_schema = LocationResponse
    create_schema = LocationCreate
    update_schema = LocationUpdate
    singular = "Location"
    plural = "Locations"

    async def upload_image(
        self, db: AsyncSession, location_id: str, upload: UploadFile | None
    ) -> JSONResponse:
        """Store the uploaded file and point the location at it.

        The location is looked up first so nothing is written to disk for
        an unknown id.
        """
        try:
            if upload is None or not upload.filename:
                raise ValidationError("Image file must be provided")
            repo = LocationRepository(db)
            await repo.get_by_id(location_id)
            filename = await save_upload(upload)
            record = await repo.set_image(location_id, filename)
            return send_formatted(
                self.serialize(record), "Location image uploaded successfully"
            )
        except Exception as e:
            return await self._fail(
                db, "upload_image", e, "Location image upload failed"
            )


location_service = LocationService()
