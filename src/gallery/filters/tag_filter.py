"""Tag-based filtering for photos."""

from collections.abc import Sequence

from gallery.models.photo import Photo
from gallery.utils.constants import ALL_TAGS


class TagFilter:
    """Filter photos by exact tag match and build the tag vocabulary.

    Tags are compared as exact text: "Travel" and "travel" are different
    tags. The "All" sentinel disables the filter.
    """

    @staticmethod
    def matches(photo: Photo, tag: str) -> bool:
        return tag == ALL_TAGS or tag in photo.tags

    @staticmethod
    def apply(photos: Sequence[Photo], tag: str) -> list[Photo]:
        """Return the photos carrying the tag, in their original order."""
        if tag == ALL_TAGS:
            return list(photos)

        return [photo for photo in photos if TagFilter.matches(photo, tag)]

    @staticmethod
    def vocabulary(photos: Sequence[Photo]) -> list[str]:
        """
        Build the list of selectable tags.

        Photos are scanned in list order and each photo's tags in their
        given order; the first occurrence of a tag fixes its position.

        Example:
            [Photo(tags=("beach", "travel")), Photo(tags=("travel", "city"))]

            → ["All", "beach", "travel", "city"]
        """
        seen: dict[str, None] = {}
        for photo in photos:
            for tag in photo.tags:
                seen.setdefault(tag, None)

        return [ALL_TAGS, *seen]
