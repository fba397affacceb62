from unittest.mock import MagicMock

import pytest
import requests

from gallery.infrastructure.http.http_photo_store import HttpPhotoStore
from gallery.models.errors import FetchError
from gallery.models.photo import PhotoDraft


def make_response(status_code: int = 200, body=None, json_error: bool = False) -> MagicMock:
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if json_error:
        response.json.side_effect = ValueError("not json")
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def adapter() -> MagicMock:
    return MagicMock()


class TestListPhotos:
    def test_lists_all_photos(self, adapter, photo_api_items) -> None:
        adapter.get.return_value = make_response(200, photo_api_items)
        store = HttpPhotoStore(adapter)

        photos = store.list_photos(featured_only=False)

        adapter.get.assert_called_once_with("/api/photos", params=None)
        assert [photo.id for photo in photos] == ["p1", "2"]

    def test_featured_only_sends_filter_param(self, adapter, photo_api_items) -> None:
        adapter.get.return_value = make_response(200, photo_api_items[:1])
        store = HttpPhotoStore(adapter)

        store.list_photos(featured_only=True)

        adapter.get.assert_called_once_with("/api/photos", params={"featured": "true"})

    def test_empty_list(self, adapter) -> None:
        adapter.get.return_value = make_response(200, [])

        assert HttpPhotoStore(adapter).list_photos(featured_only=False) == []

    def test_skips_malformed_records(self, adapter, photo_api_items) -> None:
        items = [*photo_api_items, {"id": "bad", "title": "", "image_url": "u"}, {"id": "x"}]
        adapter.get.return_value = make_response(200, items)

        photos = HttpPhotoStore(adapter).list_photos(featured_only=False)

        assert [photo.id for photo in photos] == ["p1", "2"]

    @pytest.mark.parametrize("status_code", [400, 404, 500, 503])
    def test_error_status_raises_fetch_error(self, adapter, status_code) -> None:
        adapter.get.return_value = make_response(status_code, {"detail": "nope"})

        with pytest.raises(FetchError) as exc:
            HttpPhotoStore(adapter).list_photos(featured_only=False)

        assert exc.value.message == "Failed to load photos"
        assert exc.value.status_code == status_code

    def test_transport_error_raises_fetch_error(self, adapter) -> None:
        adapter.get.side_effect = requests.ConnectionError("refused")

        with pytest.raises(FetchError) as exc:
            HttpPhotoStore(adapter).list_photos(featured_only=False)

        assert exc.value.message == "Failed to load photos"
        assert exc.value.status_code is None
        assert isinstance(exc.value.__cause__, requests.ConnectionError)

    def test_invalid_json_raises_fetch_error(self, adapter) -> None:
        adapter.get.return_value = make_response(200, json_error=True)

        with pytest.raises(FetchError):
            HttpPhotoStore(adapter).list_photos(featured_only=False)

    def test_non_array_body_raises_fetch_error(self, adapter) -> None:
        adapter.get.return_value = make_response(200, {"photos": []})

        with pytest.raises(FetchError) as exc:
            HttpPhotoStore(adapter).list_photos(featured_only=False)

        assert exc.value.message == "Failed to load photos"


class TestCreatePhoto:
    def test_posts_payload(self, adapter) -> None:
        adapter.post.return_value = make_response(201, {"id": "new"})
        draft = PhotoDraft(
            title="Sunset",
            image_url="https://example.com/s.jpg",
            tags=["travel", "family"],
            featured=True,
        )

        result = HttpPhotoStore(adapter).create_photo(draft)

        assert result is None
        adapter.post.assert_called_once_with(
            "/api/photos",
            json={
                "title": "Sunset",
                "image_url": "https://example.com/s.jpg",
                "tags": ["travel", "family"],
                "featured": True,
            },
        )

    def test_any_2xx_is_success(self, adapter) -> None:
        adapter.post.return_value = make_response(204, json_error=True)
        draft = PhotoDraft(title="T", image_url="u")

        HttpPhotoStore(adapter).create_photo(draft)

    @pytest.mark.parametrize("status_code", [400, 422, 500])
    def test_error_status_raises_fetch_error(self, adapter, status_code) -> None:
        adapter.post.return_value = make_response(status_code)

        with pytest.raises(FetchError) as exc:
            HttpPhotoStore(adapter).create_photo(PhotoDraft(title="T", image_url="u"))

        assert exc.value.message == "Failed to save photo"
        assert exc.value.status_code == status_code
        assert exc.value.details["operation"] == "create_photo"

    def test_transport_error_raises_fetch_error(self, adapter) -> None:
        adapter.post.side_effect = requests.Timeout("slow")

        with pytest.raises(FetchError) as exc:
            HttpPhotoStore(adapter).create_photo(PhotoDraft(title="T", image_url="u"))

        assert exc.value.message == "Failed to save photo"
