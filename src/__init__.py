"""Photo Gallery Client Package."""

__version__ = "1.0.0"
__author__ = "Bharat kumar"
__description__ = (
    "Single-page photo gallery client for a REST photo backend, built with NiceGUI"
)

__all__ = ["handlers", "gallery"]
