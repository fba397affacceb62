"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_FETCH_FAILED = "FETCH_FAILED"

# Internal / Unexpected
ERROR_CODE_INTERNAL_ERROR = "INTERNAL_ERROR"

# ============================================================================
# User-visible Messages
# ============================================================================

MESSAGE_REQUIRED_FIELDS = "Title and Image URL are required"
MESSAGE_LOAD_FAILED = "Failed to load photos"
MESSAGE_SAVE_FAILED = "Failed to save photo"
MESSAGE_UNEXPECTED = "Something went wrong. Please try again."

# ============================================================================
# Store Operations
# ============================================================================

OPERATION_LIST_PHOTOS = "list_photos"
OPERATION_CREATE_PHOTO = "create_photo"

# ============================================================================
# View State
# ============================================================================

ALL_TAGS: Final[str] = "All"
TAG_SEPARATOR: Final[str] = ","

# ============================================================================
# Backend API
# ============================================================================

PHOTOS_PATH = "/api/photos"
FEATURED_PARAM = "featured"
FEATURED_PARAM_TRUE = "true"
DEFAULT_CONTENT_TYPE = "application/json"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_BACKEND_URL = "GALLERY_BACKEND_URL"
ENV_REQUEST_TIMEOUT = "GALLERY_REQUEST_TIMEOUT"
ENV_UI_PORT = "GALLERY_UI_PORT"
ENV_UI_TITLE = "GALLERY_UI_TITLE"

# ============================================================================
# Defaults
# ============================================================================

DEFAULT_BACKEND_URL = "http://localhost:8000"
DEFAULT_UI_PORT = 8080
DEFAULT_UI_TITLE = "Your Photo Gallery"
