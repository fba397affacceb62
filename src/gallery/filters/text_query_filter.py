"""Free-text filtering for photos."""

from collections.abc import Sequence

from gallery.models.photo import Photo


class TextQueryFilter:
    """Filter photos by a case-insensitive substring of title or description.

    The query is trimmed before matching, so a whitespace-only query
    matches everything. A photo without a description is matched on its
    title alone.
    """

    @staticmethod
    def matches(photo: Photo, query: str) -> bool:
        """Return True if the photo matches the query."""
        needle = TextQueryFilter.normalize(query)
        if not needle:
            return True

        return needle in photo.title.lower() or needle in (photo.description or "").lower()

    @staticmethod
    def apply(photos: Sequence[Photo], query: str) -> list[Photo]:
        """Return the photos matching the query, in their original order."""
        if not TextQueryFilter.validate(query):
            return list(photos)

        return [photo for photo in photos if TextQueryFilter.matches(photo, query)]

    @staticmethod
    def normalize(query: str | None) -> str:
        return (query or "").strip().lower()

    @staticmethod
    def validate(query: str | None) -> bool:
        """Validate the search term; blank terms do not filter."""
        return bool(query and query.strip())
