"""Layout decisions for the gallery page that do not need NiceGUI."""

from collections.abc import Sequence
from typing import Literal

from gallery.models.photo import Photo
from gallery.models.view_state import ViewState

BodyView = Literal["loading", "error", "empty", "grid"]


def body_view(state: ViewState, photos: Sequence[Photo]) -> BodyView:
    """
    Pick what the main area shows.

    Loading wins over an error, an error wins over the empty message,
    and the grid is shown only when there are visible photos.

    Args:
        state: Current view state
        photos: Photos left after tag and text filtering
    """
    if state.loading:
        return "loading"
    if state.error:
        return "error"
    if not photos:
        return "empty"
    return "grid"
