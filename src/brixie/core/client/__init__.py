"""
Rebrickable API client package.

This package provides the typed async client, the response mapper, the
catalog models and the error taxonomy.
"""

from .errors import (
    ErrorKind,
    RebrickableError,
    BadRequestError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    ServerError,
    GenericApiError,
    NetworkError,
    ParseError,
    error_for_status,
    create_user_friendly_message,
)
from .models import (
    LegoSet,
    LegoPart,
    LegoTheme,
    LegoColor,
    PagedResponse,
    ApiErrorBody,
)
from .result import ApiResult
from .mapper import ResponseMapper
from .providers import (
    ApiKeyProvider,
    StaticKeyProvider,
    SettingsKeyProvider,
    TransportFactory,
    HttpxTransportFactory,
)
from .rebrickable_client import RebrickableClient, MAX_PAGE_SIZE, clamp_page_size
from .factory import RebrickableApi

__all__ = [
    # Errors
    "ErrorKind",
    "RebrickableError",
    "BadRequestError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "GenericApiError",
    "NetworkError",
    "ParseError",
    "error_for_status",
    "create_user_friendly_message",
    # Models
    "LegoSet",
    "LegoPart",
    "LegoTheme",
    "LegoColor",
    "PagedResponse",
    "ApiErrorBody",
    # Results and mapping
    "ApiResult",
    "ResponseMapper",
    # Capabilities
    "ApiKeyProvider",
    "StaticKeyProvider",
    "SettingsKeyProvider",
    "TransportFactory",
    "HttpxTransportFactory",
    # Client
    "RebrickableClient",
    "RebrickableApi",
    "MAX_PAGE_SIZE",
    "clamp_page_size",
]
