"""
Thin JSON-over-HTTP client for the booking backend.

Every call is a single request with the configured timeout; there is no
retry and no caching. Transport failures become ``NetworkError``,
non-2xx replies become ``HttpError`` carrying the backend's ``message``.
"""

import logging
from typing import Any, Optional

import requests

from autoservice.config import settings
from autoservice.errors import FetchError, HttpError, NetworkError

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class ApiClient:
    """Issues requests against ``{base_url}/api/...``."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or settings.backend.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.backend.timeout_seconds
        self.session = session or requests.Session()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get_json(self, path: str) -> Any:
        return self._request("GET", path)

    def post_json(self, path: str, payload: dict[str, Any]) -> Any:
        return self._request("POST", path, payload)

    def _request(self, method: str, path: str, payload: Optional[dict[str, Any]] = None) -> Any:
        url = self.url_for(path)
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(
                method,
                url,
                json=payload,
                headers=JSON_HEADERS,
                timeout=self.timeout,
            )
        except requests.Timeout as exc:
            logger.error("%s %s timed out after %ss", method, url, self.timeout)
            raise NetworkError(f"Request timed out after {self.timeout}s") from exc
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise NetworkError(str(exc)) from exc

        if not response.ok:
            backend_message = _backend_message(response)
            message = backend_message or response.reason or f"HTTP {response.status_code}"
            logger.error(
                "%s %s returned %s: %s", method, url, response.status_code, message,
            )
            raise HttpError(response.status_code, message, backend_message)

        try:
            return response.json()
        except ValueError as exc:
            raise FetchError(
                f"Malformed JSON from {url}", status_code=response.status_code,
            ) from exc


def _backend_message(response: requests.Response) -> Optional[str]:
    """Extract the ``message`` field of an error payload, if any."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return None
