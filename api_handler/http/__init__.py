"""
HTTP Module

Transport client, token store and the request executor.
"""

from .client import HttpClient, HttpError, HttpResponse
from .executor import ApiRequestExecutor, api_request, build_headers, serialize_body
from .token_store import TokenStore, token_manager

__all__ = [
    "HttpClient",
    "HttpError",
    "HttpResponse",
    "ApiRequestExecutor",
    "api_request",
    "build_headers",
    "serialize_body",
    "TokenStore",
    "token_manager",
]
