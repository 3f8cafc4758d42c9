"""
API Handler

Bearer-token HTTP helper returning parsed JSON or raw bytes.
"""

from api_handler.config import HttpConfig, RuntimeConfig
from api_handler.http import (
    ApiRequestExecutor,
    HttpClient,
    HttpError,
    HttpResponse,
    TokenStore,
    api_request,
    token_manager,
)
from api_handler.log import setup_logging
from api_handler.schemas import (
    ApiError,
    ApiHandlerException,
    ErrorCodes,
    NetworkException,
    RequestOptions,
)

__version__ = "0.1.0"

__all__ = [
    "HttpConfig",
    "RuntimeConfig",
    "ApiRequestExecutor",
    "HttpClient",
    "HttpError",
    "HttpResponse",
    "TokenStore",
    "api_request",
    "token_manager",
    "setup_logging",
    "ApiError",
    "ApiHandlerException",
    "ErrorCodes",
    "NetworkException",
    "RequestOptions",
]
