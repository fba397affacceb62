"""
Photo filtering service for the gallery view.

Provides a coordination layer that applies tag and free-text filters to
an already-fetched photo list. This service does not perform data access;
server-side filtering (featured only) happens when the list is fetched.
"""

from collections.abc import Sequence

from aws_lambda_powertools import Logger

from gallery.filters.tag_filter import TagFilter
from gallery.filters.text_query_filter import TextQueryFilter
from gallery.models.photo import Photo

logger = Logger(UTC=True)


class InMemoryPhotoFilter:
    """
    Service responsible for the client-side photo views.

    This class orchestrates in-memory refinement strategies:
    - Exact tag matching (with the "All" sentinel)
    - Case-insensitive substring search on title and description
    - Tag vocabulary extraction

    IMPORTANT:
    - Featured filtering is NOT applied here.
    - It must be requested from the backend when fetching.
    """

    def __init__(self) -> None:
        """Initialize filter components used for orchestration."""
        self._tag_filter: TagFilter = TagFilter()
        self._text_filter: TextQueryFilter = TextQueryFilter()

    def filter_photos(
        self,
        photos: Sequence[Photo],
        *,
        tag: str,
        query: str,
    ) -> list[Photo]:
        """
        Apply tag and text filtering together.

        A photo is kept only when both predicates hold. Order follows
        the input; nothing is re-sorted.

        Args:
            photos: Fetched photos
            tag: Selected tag, or "All"
            query: Free-text search input

        Returns:
            Filtered list of photos
        """
        result = self._tag_filter.apply(photos, tag)
        result = self._text_filter.apply(result, query)

        logger.debug(
            "Filtered photos",
            extra={"tag": tag, "query": query, "total": len(photos), "visible": len(result)},
        )
        return result

    def tag_vocabulary(self, photos: Sequence[Photo]) -> list[str]:
        """Return "All" followed by every distinct tag in first-seen order."""
        return self._tag_filter.vocabulary(photos)
