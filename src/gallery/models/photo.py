"""Shared photo models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator


class Photo(BaseModel):
    """Photo record returned by the gallery backend."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: StrictStr = Field(..., description="Server-assigned photo identifier")
    title: StrictStr = Field(..., min_length=1, description="Photo title")
    description: StrictStr | None = Field(None, description="Optional photo description")
    image_url: StrictStr = Field(..., min_length=1, description="Displayable image URL")
    tags: tuple[StrictStr, ...] = Field(default=(), description="Ordered photo tags")
    featured: StrictBool = Field(False, description="Whether the photo is highlighted")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        """Accept numeric identifiers; the client treats ids as opaque text."""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def default_tags(cls, value: Any) -> Any:
        if value is None:
            return ()
        return value

    @field_validator("featured", mode="before")
    @classmethod
    def default_featured(cls, value: Any) -> Any:
        if value is None:
            return False
        return value


class PhotoDraft(BaseModel):
    """Unsaved photo ready to be sent to the backend."""

    model_config = ConfigDict(frozen=True)

    title: StrictStr = Field(..., min_length=1)
    description: StrictStr | None = Field(None)
    image_url: StrictStr = Field(..., min_length=1)
    tags: list[StrictStr] = Field(default_factory=list)
    featured: StrictBool = Field(False)

    @field_validator("description")
    @classmethod
    def empty_description_is_absent(cls, value: str | None) -> str | None:
        return value or None

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON body for the create request.

        `description` is left out entirely when absent; every other
        field is always sent.
        """
        payload: dict[str, Any] = self.model_dump(exclude={"description"})
        if self.description:
            payload["description"] = self.description
        return payload
