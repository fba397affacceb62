"""Abstract contract for the remote photo store."""

from abc import ABC, abstractmethod

from gallery.models.photo import Photo, PhotoDraft


class PhotoStoreRepository(ABC):
    """Contract for reading and creating photo records.

    The gallery service depends on this interface, not the HTTP
    implementation, so it can be driven by an in-memory store in tests.
    """

    @abstractmethod
    def list_photos(self, *, featured_only: bool) -> list[Photo]:
        """List photos in backend order.

        Args:
            featured_only: Ask the backend for featured photos only

        Returns:
            The full (or featured) photo collection

        Raises:
            FetchError: If the photos cannot be loaded
        """

    @abstractmethod
    def create_photo(self, draft: PhotoDraft) -> None:
        """Create a photo record.

        Nothing is returned; callers re-list to see the new photo.

        Args:
            draft: Validated photo draft

        Raises:
            FetchError: If the photo cannot be saved
        """
