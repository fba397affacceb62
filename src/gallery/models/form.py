"""Add-photo form input buffer."""

from pydantic import BaseModel, ConfigDict, Field

from gallery.models.errors import ValidationError
from gallery.models.photo import PhotoDraft
from gallery.utils.constants import MESSAGE_REQUIRED_FIELDS
from gallery.utils.tags import parse_tags


class PhotoForm(BaseModel):
    """Raw values typed into the add-photo form.

    Fields hold exactly what the user entered. Nothing is validated until
    `to_draft` is called on submit.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field("", description="Photo title")
    description: str = Field("", description="Optional description")
    image_url: str = Field("", description="Image URL")
    tags: str = Field("", description="Comma-separated tags")
    featured: bool = Field(False, description="Mark as featured")

    def to_draft(self) -> PhotoDraft:
        """
        Convert the form into a draft for submission.

        Returns:
            A PhotoDraft with tags parsed from the comma-separated input

        Raises:
            ValidationError: If the title or image URL is empty
        """
        missing = [name for name in ("title", "image_url") if not getattr(self, name)]
        if missing:
            raise ValidationError(
                message=MESSAGE_REQUIRED_FIELDS,
                details={"missing_fields": missing},
            )

        return PhotoDraft(
            title=self.title,
            description=self.description or None,
            image_url=self.image_url,
            tags=parse_tags(self.tags),
            featured=self.featured,
        )
