"""HTTP transport for the taskboard remote REST API."""

import os
import logging
from typing import Any, Optional
import requests
from dotenv import load_dotenv

from taskboard.models.constants import DEFAULT_API_BASE_URL, DEFAULT_API_TIMEOUT_SEC

load_dotenv()

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "No se pudo conectar con el servidor."


class ApiError(Exception):
    """Raised when the remote API answers with a non-2xx status or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: requests.Response) -> str:
    """Pick the user-facing message for a failed response.

    Prefers the ``message`` field of a JSON error body, then the HTTP reason
    phrase, then a generic status line.
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    if response.reason:
        return response.reason
    return f"HTTP error! status: {response.status_code}"


class ApiClient:
    """Client for the remote projects/tasks REST API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the API client.

        Args:
            base_url: API base URL. If None, reads TASKBOARD_API_BASE_URL env var.
            timeout: Request timeout in seconds. If None, reads TASKBOARD_API_TIMEOUT_SEC.
            session: requests session to reuse (a new one is created if None)
        """
        self.base_url = (
            base_url or os.getenv("TASKBOARD_API_BASE_URL", DEFAULT_API_BASE_URL)
        ).rstrip("/")
        if not self.base_url:
            raise ValueError("API base URL is required. Set TASKBOARD_API_BASE_URL env var.")

        self.timeout = timeout or float(os.getenv("TASKBOARD_API_TIMEOUT_SEC", str(DEFAULT_API_TIMEOUT_SEC)))
        self.session = session or requests.Session()
        self.headers = {
            "Content-Type": "application/json",
        }

    def request(self, endpoint: str, method: str = "GET", data: Any = None) -> Any:
        """Send a request and decode the JSON response.

        Args:
            endpoint: Path below the base URL (e.g. "/Projects/123")
            method: HTTP method
            data: JSON-serializable body (POST/PUT)

        Returns:
            Decoded JSON body, or None for 204 / zero-length responses

        Raises:
            ApiError: If the request fails or the status is not 2xx
        """
        url = f"{self.base_url}{endpoint}"
        kwargs = {"headers": self.headers, "timeout": self.timeout}
        if data is not None:
            kwargs["json"] = data

        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {type(e).__name__}: {str(e)}")
            raise ApiError(NETWORK_ERROR_MESSAGE) from e

        if not response.ok:
            message = _error_message(response)
            logger.error(f"{method} {url} returned {response.status_code}: {message}")
            raise ApiError(message, status_code=response.status_code)

        empty = response.headers.get("content-length") == "0" or not response.content
        if response.status_code == 204 or empty:
            return None
        return response.json()
