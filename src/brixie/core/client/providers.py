"""
Capabilities injected into the Rebrickable client.

The client does not look up its key or build its HTTP transport itself.
It receives an ApiKeyProvider and a TransportFactory at construction, so
each deployment (CLI, tests, an embedding application) supplies its own.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx

from brixie import USER_AGENT
from brixie.config.settings import BrixieSettings

HTTP_LOGGER_NAME = "brixie.http"

logger = logging.getLogger(__name__)


class ApiKeyProvider(ABC):
    """Source of the Rebrickable API key."""

    @abstractmethod
    def get_api_key(self) -> str:
        """Return the API key to attach to requests."""


class StaticKeyProvider(ApiKeyProvider):
    """Provides a key given directly by the caller."""

    def __init__(self, api_key: str):
        self._api_key = api_key

    def get_api_key(self) -> str:
        return self._api_key


class SettingsKeyProvider(ApiKeyProvider):
    """Provides the key from BrixieSettings (BRIXIE_API_KEY or .env)."""

    def __init__(self, settings: Optional[BrixieSettings] = None):
        self._settings = settings or BrixieSettings()

    def get_api_key(self) -> str:
        if not self._settings.api_key:
            # The service answers 401, which surfaces as an AuthenticationError
            logger.warning("No Rebrickable API key configured")
            return ""
        return self._settings.api_key


class TransportFactory(ABC):
    """Builds the HTTP client a RebrickableClient owns for its lifetime."""

    @abstractmethod
    def create(self, base_url: str, logger: logging.Logger) -> httpx.AsyncClient:
        """Create a new AsyncClient rooted at base_url."""


class HttpxTransportFactory(TransportFactory):
    """
    Default transport factory backed by httpx.

    Args:
        user_agent: User-Agent header value
        timeout: Timeout in seconds; None keeps the httpx default
        debug: Log every request and response through the given logger
        transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
    """

    def __init__(
        self,
        user_agent: str = USER_AGENT,
        timeout: Optional[float] = None,
        debug: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.user_agent = user_agent
        self.timeout = timeout
        self.debug = debug
        self.transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: BrixieSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "HttpxTransportFactory":
        return cls(
            user_agent=settings.user_agent,
            timeout=settings.timeout,
            debug=settings.debug,
            transport=transport,
        )

    def create(self, base_url: str, logger: logging.Logger) -> httpx.AsyncClient:
        kwargs: Dict[str, Any] = {
            "base_url": base_url,
            "follow_redirects": True,
            "headers": {
                "User-Agent": self.user_agent,
                "Accept": "application/json",
            },
        }
        # Passing timeout=None would disable timeouts entirely
        if self.timeout is not None:
            kwargs["timeout"] = httpx.Timeout(self.timeout)
        if self.transport is not None:
            kwargs["transport"] = self.transport
        if self.debug:
            kwargs["event_hooks"] = _logging_hooks(logger)
        return httpx.AsyncClient(**kwargs)


def _redact(url: httpx.URL) -> str:
    if "key" in url.params:
        url = url.copy_set_param("key", "***")
    return str(url)


def _logging_hooks(logger: logging.Logger) -> Dict[str, list]:
    async def log_request(request: httpx.Request) -> None:
        logger.info(f"--> {request.method} {_redact(request.url)}")

    async def log_response(response: httpx.Response) -> None:
        request = response.request
        logger.info(f"<-- {response.status_code} {request.method} {_redact(request.url)}")

    return {"request": [log_request], "response": [log_response]}


def default_logger() -> logging.Logger:
    return logging.getLogger(HTTP_LOGGER_NAME)
