"""HTTP-backed implementation of PhotoStoreRepository."""

from typing import Any

from aws_lambda_powertools import Logger
from pydantic import ValidationError as PydanticValidationError
import requests

from gallery.infrastructure.adapters.http_adapter import HttpAdapter, HttpAdapterProtocol
from gallery.models.errors import FetchError
from gallery.models.photo import Photo, PhotoDraft
from gallery.repositories.photo_store_repository import PhotoStoreRepository
from gallery.utils.constants import (
    FEATURED_PARAM,
    FEATURED_PARAM_TRUE,
    MESSAGE_LOAD_FAILED,
    MESSAGE_SAVE_FAILED,
    OPERATION_CREATE_PHOTO,
    OPERATION_LIST_PHOTOS,
    PHOTOS_PATH,
)

logger = Logger(UTC=True)


class HttpPhotoStore(PhotoStoreRepository):
    """Photo store implementation backed by the gallery REST API."""

    def __init__(self, adapter: HttpAdapterProtocol | None = None) -> None:
        """Create the store using the provided HTTP adapter."""
        self._http = adapter or HttpAdapter()

    def list_photos(self, *, featured_only: bool) -> list[Photo]:
        """Fetch photos, asking the backend to filter by featured if requested."""
        params = {FEATURED_PARAM: FEATURED_PARAM_TRUE} if featured_only else None

        logger.debug(
            "Listing photos",
            extra={"featured_only": featured_only},
        )

        try:
            response = self._http.get(PHOTOS_PATH, params=params)
        except requests.RequestException as exc:
            logger.error(
                "Photo list request failed",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            raise FetchError(
                message=MESSAGE_LOAD_FAILED,
                details={"operation": OPERATION_LIST_PHOTOS},
            ) from exc

        if not response.ok:
            logger.error(
                "Photo list returned an error status",
                extra={"status": response.status_code},
            )
            raise FetchError(
                message=MESSAGE_LOAD_FAILED,
                details={
                    "operation": OPERATION_LIST_PHOTOS,
                    "status_code": response.status_code,
                },
            )

        try:
            items = response.json()
        except ValueError as exc:
            logger.error("Photo list response is not valid JSON")
            raise FetchError(
                message=MESSAGE_LOAD_FAILED,
                details={
                    "operation": OPERATION_LIST_PHOTOS,
                    "status_code": response.status_code,
                },
            ) from exc

        if not isinstance(items, list):
            logger.error(
                "Photo list response is not an array",
                extra={"body_type": type(items).__name__},
            )
            raise FetchError(
                message=MESSAGE_LOAD_FAILED,
                details={
                    "operation": OPERATION_LIST_PHOTOS,
                    "status_code": response.status_code,
                },
            )

        photos = self._parse_photos(items)
        logger.info(
            "Photos loaded",
            extra={"featured_only": featured_only, "count": len(photos)},
        )
        return photos

    def create_photo(self, draft: PhotoDraft) -> None:
        """Send a new photo to the backend; the response body is ignored."""
        payload = draft.to_payload()

        logger.debug(
            "Creating photo",
            extra={"title": draft.title, "tags": draft.tags, "featured": draft.featured},
        )

        try:
            response = self._http.post(PHOTOS_PATH, json=payload)
        except requests.RequestException as exc:
            logger.error(
                "Photo create request failed",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            raise FetchError(
                message=MESSAGE_SAVE_FAILED,
                details={"operation": OPERATION_CREATE_PHOTO},
            ) from exc

        if not response.ok:
            logger.error(
                "Photo create returned an error status",
                extra={"status": response.status_code},
            )
            raise FetchError(
                message=MESSAGE_SAVE_FAILED,
                details={
                    "operation": OPERATION_CREATE_PHOTO,
                    "status_code": response.status_code,
                },
            )

        logger.info("Photo saved", extra={"title": draft.title})

    @staticmethod
    def _parse_photos(items: list[Any]) -> list[Photo]:
        photos: list[Photo] = []

        for item in items:
            try:
                photos.append(Photo.model_validate(item))
            except PydanticValidationError as exc:
                logger.warning(
                    "Skipping malformed photo",
                    extra={"errors": exc.errors(include_url=False)},
                )

        return photos
