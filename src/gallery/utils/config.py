"""Runtime configuration read from the environment."""

import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from gallery.utils.constants import (
    DEFAULT_BACKEND_URL,
    DEFAULT_UI_PORT,
    DEFAULT_UI_TITLE,
    ENV_BACKEND_URL,
    ENV_REQUEST_TIMEOUT,
    ENV_UI_PORT,
    ENV_UI_TITLE,
)


class GalleryConfig(BaseModel):
    """Configuration for the gallery client and its UI server."""

    backend_url: str = Field(
        DEFAULT_BACKEND_URL,
        min_length=1,
        description="Base URL of the photo backend",
    )
    request_timeout: float | None = Field(
        None,
        gt=0,
        description="Per-request timeout in seconds; None leaves it to the transport",
    )
    ui_port: int = Field(DEFAULT_UI_PORT, ge=1, le=65535)
    ui_title: str = Field(DEFAULT_UI_TITLE)

    @field_validator("backend_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @classmethod
    def from_env(cls) -> "GalleryConfig":
        """Create config from environment variables.

        Empty variables fall back to the defaults, the same as unset ones.
        """
        timeout = os.getenv(ENV_REQUEST_TIMEOUT)
        return cls(
            backend_url=os.getenv(ENV_BACKEND_URL) or DEFAULT_BACKEND_URL,
            request_timeout=float(timeout) if timeout else None,
            ui_port=int(os.getenv(ENV_UI_PORT) or DEFAULT_UI_PORT),
            ui_title=os.getenv(ENV_UI_TITLE) or DEFAULT_UI_TITLE,
        )


# Global config instance
_config: Optional[GalleryConfig] = None


def get_config() -> GalleryConfig:
    """Get the global config instance, reading the environment on first use."""
    global _config
    if _config is None:
        _config = GalleryConfig.from_env()
    return _config


def set_config(config: GalleryConfig | None) -> None:
    """Set (or with None, reset) the global config instance."""
    global _config
    _config = config
