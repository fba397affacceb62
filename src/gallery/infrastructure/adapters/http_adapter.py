"""Thin adapter for talking HTTP to the gallery backend."""

from collections.abc import Mapping
from typing import Any, Protocol

import requests

from gallery.utils.config import get_config
from gallery.utils.constants import DEFAULT_CONTENT_TYPE


class HttpAdapterProtocol(Protocol):
    """Minimal HTTP adapter protocol (repository-facing)."""

    def get(
        self,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
    ) -> requests.Response: ...

    def post(self, path: str, *, json: Any) -> requests.Response: ...


class HttpAdapter:
    """Low-level HTTP operations (mechanical, no error handling).

    This adapter:
    - Wraps a requests session bound to the backend base URL
    - Does NOT inspect status codes or handle errors (lets them bubble up)
    - Domain implementations check responses and translate errors
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Create the adapter, falling back to the configured backend URL."""
        config = get_config()

        self._base_url = (base_url or config.backend_url).rstrip("/")
        self._timeout = timeout if timeout is not None else config.request_timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Content-Type": DEFAULT_CONTENT_TYPE})

    @property
    def base_url(self) -> str:
        return self._base_url

    def url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def get(
        self,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
    ) -> requests.Response:
        """Issue a GET request.
        Raises requests exceptions - caught by domain implementation.
        """
        return self._session.get(
            self.url(path),
            params=dict(params) if params else None,
            timeout=self._timeout,
        )

    def post(self, path: str, *, json: Any) -> requests.Response:
        """Issue a POST request with a JSON body.
        Raises requests exceptions - caught by domain implementation.
        """
        return self._session.post(
            self.url(path),
            json=json,
            timeout=self._timeout,
        )

    def close(self) -> None:
        self._session.close()
