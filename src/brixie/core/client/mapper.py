"""
Translation of raw HTTP outcomes into ApiResult values.

The mapper never raises. A response with a success status is decoded into
the requested model; any other status is classified by its code; an
exception raised before a response arrived becomes a NetworkError.
"""

import logging
from typing import Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .errors import (
    NetworkError,
    ParseError,
    RebrickableError,
    error_for_status,
)
from .models import ApiErrorBody
from .result import ApiResult

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class ResponseMapper:
    """Converts httpx responses and transport failures into ApiResult."""

    def map_response(self, response: httpx.Response, model_type: Type[M]) -> ApiResult[M]:
        """
        Decode or classify a response.

        Args:
            response: Response returned by the transport
            model_type: Model the body should decode into on success

        Returns:
            Success with the decoded model, or a failure carrying the
            classified error
        """
        if response.is_success:
            try:
                return ApiResult.success(model_type.model_validate_json(response.content))
            except ValidationError as e:
                logger.warning(
                    f"Could not decode {model_type.__name__} from response "
                    f"(status {response.status_code}): {e.error_count()} validation error(s)"
                )
                return ApiResult.failure(ParseError("Failed to parse response", cause=e))

        return ApiResult.failure(self.map_status(response))

    def map_status(self, response: httpx.Response) -> RebrickableError:
        """Classify a non-success response, using its error body when it has one."""
        status = response.status_code
        try:
            body = ApiErrorBody.model_validate_json(response.content)
        except ValidationError:
            reason = response.reason_phrase or "Unknown error"
            return error_for_status(status, f"HTTP {status}: {reason}")

        return error_for_status(status, body.detail, code=body.code)

    def map_exception(self, exc: Exception) -> RebrickableError:
        """Wrap a failure raised before any response was received."""
        if isinstance(exc, RebrickableError):
            return exc
        return NetworkError(f"Network error: {exc}", cause=exc)
