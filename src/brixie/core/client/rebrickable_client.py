"""
Async client for the Rebrickable LEGO catalog API.

Each operation issues exactly one GET request and returns an ApiResult.
There is no caching, retrying or automatic pagination; callers follow
``PagedResponse.next`` themselves by requesting the next page number.
"""

import logging
from typing import Any, Dict, Optional, Type, TypeVar
from urllib.parse import quote

from pydantic import BaseModel

from brixie.config.settings import DEFAULT_BASE_URL, BrixieSettings
from .errors import BadRequestError
from .mapper import ResponseMapper
from .models import LegoColor, LegoPart, LegoSet, LegoTheme, PagedResponse
from .providers import (
    ApiKeyProvider,
    HttpxTransportFactory,
    SettingsKeyProvider,
    TransportFactory,
    default_logger,
)
from .result import ApiResult

M = TypeVar("M", bound=BaseModel)

MAX_PAGE_SIZE = 1000
DEFAULT_PAGE_SIZE = 20


class RebrickableClient:
    """
    Typed client for sets, parts, themes and colors.

    The API key is resolved once, here, from the key provider. The HTTP
    transport is created here too and stays open until ``close()``.
    Instances are safe to share between concurrent tasks.
    """

    def __init__(
        self,
        key_provider: Optional[ApiKeyProvider] = None,
        transport_factory: Optional[TransportFactory] = None,
        logger: Optional[logging.Logger] = None,
        base_url: str = DEFAULT_BASE_URL,
        mapper: Optional[ResponseMapper] = None,
    ):
        self._logger = logger or default_logger()
        self._api_key = (key_provider or SettingsKeyProvider()).get_api_key()
        self._mapper = mapper or ResponseMapper()
        self._base_url = base_url
        factory = transport_factory or HttpxTransportFactory()
        self._http = factory.create(base_url, self._logger)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[BrixieSettings] = None,
        **kwargs: Any,
    ) -> "RebrickableClient":
        """Build a client whose key, base URL and transport options come from settings."""
        settings = settings or BrixieSettings()
        kwargs.setdefault("key_provider", SettingsKeyProvider(settings))
        kwargs.setdefault("transport_factory", HttpxTransportFactory.from_settings(settings))
        kwargs.setdefault("base_url", settings.base_url)
        return cls(**kwargs)

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def closed(self) -> bool:
        return self._http.is_closed

    async def list_sets(
        self,
        search: Optional[str] = None,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        theme_id: Optional[int] = None,
        min_year: Optional[int] = None,
        max_year: Optional[int] = None,
        min_parts: Optional[int] = None,
        max_parts: Optional[int] = None,
    ) -> ApiResult[PagedResponse[LegoSet]]:
        """Search LEGO sets.

        Args:
            search: Free-text search query
            page: Page number, starting at 1
            page_size: Results per page, capped at 1000
            theme_id: Only sets in this theme
            min_year: Only sets released in or after this year
            max_year: Only sets released in or before this year
            min_parts: Only sets with at least this many parts
            max_parts: Only sets with at most this many parts
        """
        return await self._get(
            "sets/",
            PagedResponse[LegoSet],
            page=page,
            page_size=clamp_page_size(page_size),
            search=search,
            theme_id=theme_id,
            min_year=min_year,
            max_year=max_year,
            min_parts=min_parts,
            max_parts=max_parts,
        )

    async def get_set(self, set_num: str) -> ApiResult[LegoSet]:
        """Get one set by number, e.g. ``"8880-1"``."""
        return await self._get_resource("sets", set_num, LegoSet)

    async def list_parts(
        self,
        search: Optional[str] = None,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        part_cat_id: Optional[int] = None,
    ) -> ApiResult[PagedResponse[LegoPart]]:
        """Search LEGO parts, optionally within one part category."""
        return await self._get(
            "parts/",
            PagedResponse[LegoPart],
            page=page,
            page_size=clamp_page_size(page_size),
            search=search,
            part_cat_id=part_cat_id,
        )

    async def get_part(self, part_num: str) -> ApiResult[LegoPart]:
        """Get one part by number, e.g. ``"3001"``."""
        return await self._get_resource("parts", part_num, LegoPart)

    async def list_themes(
        self,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> ApiResult[PagedResponse[LegoTheme]]:
        return await self._get(
            "themes/",
            PagedResponse[LegoTheme],
            page=page,
            page_size=clamp_page_size(page_size),
        )

    async def list_colors(
        self,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> ApiResult[PagedResponse[LegoColor]]:
        return await self._get(
            "colors/",
            PagedResponse[LegoColor],
            page=page,
            page_size=clamp_page_size(page_size),
        )

    async def _get_resource(self, collection: str, resource_id: str, model_type: Type[M]) -> ApiResult[M]:
        """Fetch ``{collection}/{resource_id}/``; a blank id fails without a request."""
        if not resource_id or not resource_id.strip():
            error = BadRequestError(f"A {collection[:-1]} number is required")
            self._logger.warning(f"GET {collection}/ skipped: {error.message}")
            return ApiResult.failure(error)
        return await self._get(f"{collection}/{quote(resource_id, safe='')}/", model_type)

    async def _get(self, path: str, model_type: Type[M], **params: Any) -> ApiResult[M]:
        query: Dict[str, Any] = {"key": self._api_key}
        query.update({name: value for name, value in params.items() if value is not None})

        try:
            response = await self._http.get(path, params=query)
        except Exception as e:
            error = self._mapper.map_exception(e)
            self._logger.error(f"GET {path} failed: {error}")
            return ApiResult.failure(error)

        result = self._mapper.map_response(response, model_type)
        if result.is_failure:
            self._logger.warning(f"GET {path} returned {result.error!r}")
        return result

    async def close(self) -> None:
        """Release the HTTP transport. In-flight requests are abandoned."""
        await self._http.aclose()

    aclose = close

    async def __aenter__(self) -> "RebrickableClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


def clamp_page_size(page_size: int) -> int:
    """Cap page_size at MAX_PAGE_SIZE."""
    return min(page_size, MAX_PAGE_SIZE)
