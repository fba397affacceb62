"""Tag input parsing."""

from gallery.utils.constants import TAG_SEPARATOR


def parse_tags(value: str | None) -> list[str]:
    """Split comma-separated tag input into trimmed, non-empty tokens.

    Order is kept and duplicates are not removed.

    Example:
        "travel, , family,  nature ," -> ["travel", "family", "nature"]
    """
    if not value:
        return []

    return [token.strip() for token in value.split(TAG_SEPARATOR) if token.strip()]
