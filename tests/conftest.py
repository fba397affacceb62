"""
Pytest configuration and fixtures for the photo gallery tests.
Provides sample photos, an in-memory photo store and config isolation.
"""

import threading
from collections.abc import Callable
from typing import Any

import pytest

from gallery.models.errors import FetchError
from gallery.models.photo import Photo, PhotoDraft
from gallery.repositories.photo_store_repository import PhotoStoreRepository
from gallery.utils.config import set_config
from gallery.utils.constants import (
    ENV_BACKEND_URL,
    ENV_REQUEST_TIMEOUT,
    ENV_UI_PORT,
    ENV_UI_TITLE,
    MESSAGE_LOAD_FAILED,
    MESSAGE_SAVE_FAILED,
)


class InMemoryPhotoStore(PhotoStoreRepository):
    """Photo store double that records every call."""

    def __init__(self, photos: list[Photo] | None = None) -> None:
        self.photos: list[Photo] = list(photos or [])
        self.list_calls: list[bool] = []
        self.created: list[PhotoDraft] = []
        self.fail_list = False
        self.fail_create = False
        self.before_list: Callable[[bool], None] | None = None
        self._lock = threading.Lock()

    def list_photos(self, *, featured_only: bool) -> list[Photo]:
        with self._lock:
            self.list_calls.append(featured_only)

        if self.before_list:
            self.before_list(featured_only)

        if self.fail_list:
            raise FetchError(message=MESSAGE_LOAD_FAILED, details={"status_code": 500})

        if featured_only:
            return [photo for photo in self.photos if photo.featured]
        return list(self.photos)

    def create_photo(self, draft: PhotoDraft) -> None:
        if self.fail_create:
            raise FetchError(message=MESSAGE_SAVE_FAILED, details={"status_code": 500})

        self.created.append(draft)
        self.photos.append(
            Photo(
                id=str(len(self.photos) + 1),
                title=draft.title,
                description=draft.description,
                image_url=draft.image_url,
                tags=draft.tags,
                featured=draft.featured,
            )
        )


def make_photo(**overrides: Any) -> Photo:
    data: dict[str, Any] = {
        "id": "1",
        "title": "Untitled",
        "image_url": "https://example.com/photo.jpg",
    }
    data.update(overrides)
    return Photo(**data)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Start every test with a clean environment and no cached config."""
    for name in (ENV_BACKEND_URL, ENV_REQUEST_TIMEOUT, ENV_UI_PORT, ENV_UI_TITLE):
        monkeypatch.delenv(name, raising=False)

    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def sunset_and_cabin() -> list[Photo]:
    return [
        make_photo(id="1", title="Sunset", tags=["beach", "travel"], featured=True),
        make_photo(id="2", title="Cabin", tags=["travel"]),
    ]


@pytest.fixture
def sample_photos() -> list[Photo]:
    return [
        make_photo(
            id="p1",
            title="Sunset at the beach",
            description="Golden hour over the bay",
            tags=["beach", "travel"],
            featured=True,
        ),
        make_photo(
            id="p2",
            title="Mountain Cabin",
            description="Weekend away in the SNOW",
            tags=["travel", "winter"],
        ),
        make_photo(id="p3", title="Family picnic", tags=["family", "nature"]),
        make_photo(
            id="p4",
            title="Forest trail",
            description=None,
            tags=["nature", "Travel"],
            featured=True,
        ),
    ]


@pytest.fixture
def photo_store(sample_photos) -> InMemoryPhotoStore:
    return InMemoryPhotoStore(sample_photos)


@pytest.fixture
def photo_api_items() -> list[dict[str, Any]]:
    """Photo records as the backend returns them."""
    return [
        {
            "id": "p1",
            "title": "Sunset",
            "description": "Golden hour",
            "image_url": "https://example.com/sunset.jpg",
            "tags": ["beach", "travel"],
            "featured": True,
        },
        {
            "id": 2,
            "title": "Cabin",
            "image_url": "https://example.com/cabin.jpg",
            "tags": None,
            "featured": False,
            "created_at": "2024-01-15T10:42:31+00:00",
        },
    ]


@pytest.fixture
def photo_factory() -> Callable[..., Photo]:
    return make_photo


@pytest.fixture
def store_factory() -> Callable[..., InMemoryPhotoStore]:
    return InMemoryPhotoStore
