"""Gallery view state model."""

from pydantic import BaseModel, ConfigDict, Field

from gallery.models.form import PhotoForm
from gallery.models.photo import Photo
from gallery.utils.constants import ALL_TAGS


class ViewState(BaseModel):
    """
    Everything the gallery view shows, in one immutable structure.

    The state is never mutated in place. Transition functions in
    `gallery.state.transitions` return updated copies.
    """

    model_config = ConfigDict(frozen=True)

    photos: tuple[Photo, ...] = Field(default=(), description="Last accepted fetch result")
    selected_tag: str = Field(ALL_TAGS, description="Active tag chip")
    show_featured_only: bool = Field(False, description="Fetch featured photos only")
    query: str = Field("", description="Free-text search input")
    form: PhotoForm = Field(default_factory=PhotoForm)

    loading: bool = Field(False, description="Latest list request still in flight")
    error: str = Field("", description="Displayable error; empty when none")
    latest_request_id: int = Field(
        0,
        ge=0,
        description="Id of the most recently issued list request",
    )
