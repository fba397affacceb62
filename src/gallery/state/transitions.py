"""
Pure state transitions and derived views for the gallery.

Every function here takes a ViewState and returns a new one; none of them
touch the network or mutate their input. Network effects live in the
gallery service, which feeds results back through these functions.
"""

from collections.abc import Iterable
from typing import Any

from aws_lambda_powertools import Logger

from gallery.filters.in_memory_photo_filter import InMemoryPhotoFilter
from gallery.models.form import PhotoForm
from gallery.models.photo import Photo
from gallery.models.view_state import ViewState

logger = Logger(UTC=True)

_photo_filter = InMemoryPhotoFilter()


# ============================================================================
# Derived views
# ============================================================================


def tag_vocabulary(state: ViewState) -> list[str]:
    """Selectable tags: "All" then each distinct tag in first-seen order."""
    return _photo_filter.tag_vocabulary(state.photos)


def visible_photos(state: ViewState) -> list[Photo]:
    """Photos passing both the selected tag and the search query."""
    return _photo_filter.filter_photos(
        state.photos,
        tag=state.selected_tag,
        query=state.query,
    )


# ============================================================================
# List requests
# ============================================================================


def begin_fetch(state: ViewState) -> tuple[ViewState, int]:
    """
    Issue a new list request.

    Returns:
        A tuple of (updated_state, request_id). Only the response for
        the returned id is accepted until another request is issued.
    """
    request_id = state.latest_request_id + 1
    updated = state.model_copy(
        update={"latest_request_id": request_id, "loading": True, "error": ""}
    )
    return updated, request_id


def is_stale(state: ViewState, request_id: int) -> bool:
    return request_id != state.latest_request_id


def fetch_succeeded(state: ViewState, request_id: int, photos: Iterable[Photo]) -> ViewState:
    """Replace the photo list with a fetch result, unless a newer request was issued."""
    if is_stale(state, request_id):
        logger.warning(
            "Discarding stale photo list",
            extra={"request_id": request_id, "latest_request_id": state.latest_request_id},
        )
        return state

    return state.model_copy(update={"photos": tuple(photos), "loading": False})


def fetch_failed(state: ViewState, request_id: int, message: str) -> ViewState:
    """Record a list failure, unless a newer request was issued.

    The previously fetched photos stay in place.
    """
    if is_stale(state, request_id):
        logger.warning(
            "Discarding stale photo list failure",
            extra={"request_id": request_id, "latest_request_id": state.latest_request_id},
        )
        return state

    return state.model_copy(update={"error": message, "loading": False})


# ============================================================================
# Filters
# ============================================================================


def set_featured_only(state: ViewState, value: bool) -> ViewState:
    return state.model_copy(update={"show_featured_only": value})


def select_tag(state: ViewState, tag: str) -> ViewState:
    return state.model_copy(update={"selected_tag": tag})


def set_query(state: ViewState, query: str) -> ViewState:
    return state.model_copy(update={"query": query})


# ============================================================================
# Add-photo form
# ============================================================================


def update_form(state: ViewState, **fields: Any) -> ViewState:
    """Change one or more form fields.

    Raises:
        ValueError: If an unknown field name is given
    """
    unknown = set(fields) - set(PhotoForm.model_fields)
    if unknown:
        raise ValueError(f"Invalid form field(s): {', '.join(sorted(unknown))}")

    form = PhotoForm.model_validate({**state.form.model_dump(), **fields})
    return state.model_copy(update={"form": form})


def begin_submit(state: ViewState) -> ViewState:
    return state.model_copy(update={"error": ""})


def submit_succeeded(state: ViewState) -> ViewState:
    """Clear every form field after a successful save."""
    return state.model_copy(update={"form": PhotoForm()})


def fail(state: ViewState, message: str) -> ViewState:
    """Capture an error from any handler. Replaces any prior error.

    `loading` is left alone: it belongs to the latest list request, which
    only `fetch_succeeded` or `fetch_failed` may resolve.
    """
    return state.model_copy(update={"error": message})
