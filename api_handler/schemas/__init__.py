"""
Schemas for the API handler.

Exports the request options type and the error taxonomy.
"""

from .errors import (
    DEFAULT_ERROR_MESSAGE,
    ApiError,
    ApiHandlerException,
    ErrorCodes,
    NetworkException,
)
from .options import JSON_MEDIA_TYPE, RequestOptions

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "ApiError",
    "ApiHandlerException",
    "ErrorCodes",
    "NetworkException",
    "JSON_MEDIA_TYPE",
    "RequestOptions",
]
