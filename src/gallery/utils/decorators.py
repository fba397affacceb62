"""
Error boundary decorator for gallery event handlers.
"""

from __future__ import annotations

import traceback
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, Protocol, TypeVar

from aws_lambda_powertools import Logger

from gallery.models.errors import GalleryError
from gallery.models.view_state import ViewState
from gallery.state import transitions
from gallery.utils.constants import MESSAGE_UNEXPECTED

logger = Logger(service="gallery-handler", UTC=True)


class StatefulHandlerOwner(Protocol):
    """Anything exposing a replaceable view state."""

    state: ViewState


OwnerT = TypeVar("OwnerT", bound=StatefulHandlerOwner)


def _get_user_friendly_message(exc: Exception) -> str:
    """
    Convert technical exception messages into user-friendly ones.

    Gallery errors already carry a displayable message. Transport failures
    reach here as FetchError, since the photo store translates them.
    """
    if isinstance(exc, GalleryError):
        return exc.message

    return MESSAGE_UNEXPECTED


def _log_error(
    message: str,
    *,
    handler_name: str,
    exc: Exception,
    level: str = "warning",
) -> None:
    """
    Log error with consistent structure and full context.

    Args:
        message: Log message
        handler_name: Name of the handler function
        exc: Exception that was raised
        level: Log level ('warning' or 'exception')
    """
    log_extra: dict[str, Any] = {
        "handler": handler_name,
        "error": str(exc),
        "error_type": type(exc).__name__,
    }

    if isinstance(exc, GalleryError):
        log_extra["error_code"] = exc.error_code
        log_extra["details"] = exc.details

    if level == "exception":
        # logger.exception automatically includes traceback
        logger.exception(message, extra=log_extra)
    else:
        # For warnings, manually add traceback
        log_extra["traceback"] = traceback.format_exc()
        logger.warning(message, extra=log_extra)


def user_action(
    func: Callable[..., Awaitable[None]],
) -> Callable[..., Awaitable[None]]:
    """
    Decorator for gallery event handlers.

    Provides:
    - Centralized exception handling
    - A single displayable error string on the owner's view state
    - Full traceback logging for unexpected failures

    A failing handler never raises to the UI, so the user can always
    repeat the action that failed.

    Example:
        @user_action
        async def submit(self) -> None:
            ...
    """

    @wraps(func)
    async def wrapper(self: OwnerT, *args: Any, **kwargs: Any) -> None:
        try:
            await func(self, *args, **kwargs)

        except GalleryError as exc:
            _log_error(
                "Gallery action failed",
                handler_name=func.__name__,
                exc=exc,
            )
            self.state = transitions.fail(self.state, exc.message)

        # Catch-all for unexpected errors
        except Exception as exc:
            _log_error(
                "Unexpected error in gallery action",
                handler_name=func.__name__,
                exc=exc,
                level="exception",
            )
            self.state = transitions.fail(self.state, _get_user_friendly_message(exc))

    return wrapper
