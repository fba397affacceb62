import pytest
from pydantic import ValidationError

from gallery.utils.config import GalleryConfig, get_config, set_config
from gallery.utils.constants import (
    DEFAULT_BACKEND_URL,
    ENV_BACKEND_URL,
    ENV_REQUEST_TIMEOUT,
    ENV_UI_PORT,
)


class TestGalleryConfig:
    def test_defaults_without_environment(self) -> None:
        config = GalleryConfig.from_env()

        assert config.backend_url == DEFAULT_BACKEND_URL
        assert config.request_timeout is None
        assert config.ui_port == 8080
        assert config.ui_title == "Your Photo Gallery"

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv(ENV_BACKEND_URL, "https://photos.example.com/")
        monkeypatch.setenv(ENV_REQUEST_TIMEOUT, "2.5")
        monkeypatch.setenv(ENV_UI_PORT, "9000")

        config = GalleryConfig.from_env()

        assert config.backend_url == "https://photos.example.com"
        assert config.request_timeout == 2.5
        assert config.ui_port == 9000

    def test_empty_backend_url_falls_back(self, monkeypatch) -> None:
        monkeypatch.setenv(ENV_BACKEND_URL, "")

        assert GalleryConfig.from_env().backend_url == DEFAULT_BACKEND_URL

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValidationError):
            GalleryConfig(request_timeout=0)


class TestGetConfig:
    def test_config_is_read_once(self, monkeypatch) -> None:
        monkeypatch.setenv(ENV_BACKEND_URL, "http://first:8000")
        first = get_config()

        monkeypatch.setenv(ENV_BACKEND_URL, "http://second:8000")

        assert get_config() is first
        assert get_config().backend_url == "http://first:8000"

    def test_set_config_overrides(self) -> None:
        set_config(GalleryConfig(backend_url="http://override:1234"))

        assert get_config().backend_url == "http://override:1234"
