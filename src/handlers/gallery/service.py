"""Event handling for the gallery view.

This module runs the gallery's user events through the pure state
transitions and performs the two network effects (list and create)
against the photo store.
"""

import asyncio
from collections.abc import Callable
from typing import Any

from aws_lambda_powertools import Logger

from gallery.models.errors import FetchError
from gallery.models.photo import Photo
from gallery.models.view_state import ViewState
from gallery.repositories.photo_store_repository import PhotoStoreRepository
from gallery.state import transitions
from gallery.utils.constants import MESSAGE_UNEXPECTED
from gallery.utils.decorators import user_action

logger = Logger(UTC=True)

StateListener = Callable[[ViewState], None]


class GalleryService:
    """Application service owning the gallery view state.

    This service orchestrates:
    - Fetching photos on mount and when the featured toggle changes
    - Client-side tag and text filtering (no network)
    - Validating and saving the add-photo form, then refreshing

    Store calls run in a worker thread so the event loop stays free;
    state is only ever replaced on the loop itself. List requests are
    numbered and only the most recent one may update the view.
    """

    def __init__(
        self,
        store: PhotoStoreRepository,
        *,
        state: ViewState | None = None,
    ) -> None:
        """Initialize the service with a photo store and optional starting state."""
        self._store = store
        self._state = state or ViewState()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> ViewState:
        return self._state

    @state.setter
    def state(self, value: ViewState) -> None:
        self._state = value
        for listener in self._listeners:
            listener(value)

    def subscribe(self, listener: StateListener) -> None:
        """Call `listener` with the new state after every change."""
        self._listeners.append(listener)

    @property
    def tag_vocabulary(self) -> list[str]:
        return transitions.tag_vocabulary(self._state)

    @property
    def visible_photos(self) -> list[Photo]:
        return transitions.visible_photos(self._state)

    # ------------------------------------------------------------------
    # Network-backed events
    # ------------------------------------------------------------------

    @user_action
    async def mount(self) -> None:
        """Load the initial photo list."""
        logger.debug("Gallery mounted")
        await self.refresh()

    @user_action
    async def set_featured_only(self, value: bool) -> None:
        """Toggle server-side featured filtering and re-fetch."""
        self.state = transitions.set_featured_only(self.state, value)
        await self.refresh()

    @user_action
    async def refresh(self) -> None:
        """
        Fetch the photo list using the current featured flag.

        The result replaces the list wholesale. If another refresh was
        issued while this one was waiting, this result is dropped.
        """
        self.state, request_id = transitions.begin_fetch(self.state)
        featured_only = self.state.show_featured_only

        logger.debug(
            "Refreshing photos",
            extra={"request_id": request_id, "featured_only": featured_only},
        )

        try:
            photos = await asyncio.to_thread(
                self._store.list_photos,
                featured_only=featured_only,
            )
        except FetchError as exc:
            self.state = transitions.fetch_failed(self.state, request_id, exc.message)
            return
        except Exception:
            logger.exception(
                "Unexpected error while listing photos",
                extra={"request_id": request_id, "featured_only": featured_only},
            )
            self.state = transitions.fetch_failed(self.state, request_id, MESSAGE_UNEXPECTED)
            return

        self.state = transitions.fetch_succeeded(self.state, request_id, photos)

    @user_action
    async def submit(self) -> None:
        """
        Save the add-photo form.

        The flow is:
        1. Validate required fields (no network call on failure)
        2. Create the photo on the backend
        3. Clear the form
        4. Re-fetch the list with the current featured flag

        Raises:
            Nothing; failures are captured on the view state.
        """
        self.state = transitions.begin_submit(self.state)

        draft = self.state.form.to_draft()
        await asyncio.to_thread(self._store.create_photo, draft)

        logger.info("Photo submitted", extra={"title": draft.title})

        self.state = transitions.submit_succeeded(self.state)
        await self.refresh()

    # ------------------------------------------------------------------
    # Local events
    # ------------------------------------------------------------------

    def select_tag(self, tag: str) -> None:
        self.state = transitions.select_tag(self.state, tag)

    def set_query(self, query: str) -> None:
        self.state = transitions.set_query(self.state, query)

    def update_form(self, **fields: Any) -> None:
        self.state = transitions.update_form(self.state, **fields)
