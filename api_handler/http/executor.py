"""
API Request Executor

Builds a complete request from RequestOptions, attaches the bearer token,
dispatches it and decodes the response as JSON or raw bytes.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Mapping, Optional, Union

from api_handler.config import RuntimeConfig, get_default_config
from api_handler.schemas import NetworkException, RequestOptions

from .client import HttpClient, HttpError, HttpResponse
from .token_store import TokenStore, token_manager

logger = logging.getLogger(__name__)


CACHE_SUPPRESSION_HEADERS = {
    "Cache-Control": "private, no-cache, no-store, must-revalidate",
    "Expires": "-1",
    "Pragma": "no-cache",
}

BODY_METHODS = ("POST", "PATCH")


def _render_token(token: Any) -> str:
    # None renders the way the original string interpolation did
    if token is None:
        return "null"
    return str(token)


def _render_header_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_headers(options: RequestOptions, token: Any) -> dict[str, str]:
    """
    Default headers overlaid by the caller's headers.

    A caller header with exactly the same name replaces the default. Names
    that differ only in case are still one header on the wire, so their
    values are joined with ", " under the first spelling seen.
    """
    defaults = {
        "Content-Type": "application/json",
        "Accept": options.file_type,
        "Authorization": f"Bearer {_render_token(token)}",
        **CACHE_SUPPRESSION_HEADERS,
    }
    merged = {**defaults, **options.headers}

    headers: dict[str, str] = {}
    spelling: dict[str, str] = {}
    for name, value in merged.items():
        value = _render_header_value(value)
        first = spelling.setdefault(name.lower(), name)
        if first in headers:
            headers[first] = f"{headers[first]}, {value}"
        else:
            headers[first] = value
    return headers


def serialize_body(options: RequestOptions) -> Optional[bytes]:
    """
    Serialize the body for POST and PATCH only.

    An omitted body is sent as the JSON literal `null`. Other methods never
    carry a body, even if one was supplied.
    """
    if options.method not in BODY_METHODS:
        return None
    return json.dumps(
        _finite_or_null(options.body),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    ).encode("utf-8")


def _finite_or_null(value: Any) -> Any:
    """Replace NaN and infinities with None, which serializes as `null`."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite_or_null(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite_or_null(v) for v in value]
    return value


class ApiRequestExecutor:
    """
    Performs one request per invoke() call.

    Usage:
        store = TokenStore()
        store.set_token("tok")
        executor = ApiRequestExecutor(token_store=store)

        items = executor.invoke({"url": "https://api.example.com/items"})
        image = executor(url="https://api.example.com/logo", fileType="image/png")
    """

    def __init__(
        self,
        *,
        token_store: Optional[TokenStore] = None,
        http: Optional[HttpClient] = None,
        config: Optional[RuntimeConfig] = None,
    ) -> None:
        self.config = config or get_default_config()
        self.token_store = token_store if token_store is not None else token_manager
        # Only a client built here is closed by close()
        self._owns_http = http is None
        self.http = http or HttpClient(
            timeout=self.config.http.timeout,
            proxy=self.config.http.proxy,
        )

    def resolve_token(self, options: RequestOptions) -> Any:
        """Explicit token wins unless it is None; the store is read now."""
        if options.access_token is not None:
            return options.access_token
        return self.token_store.get_token()

    def invoke(self, options: Union[RequestOptions, Mapping[str, Any]]) -> Union[Any, bytes]:
        """
        Execute the request described by `options`.

        Returns:
            Decoded JSON value, or raw bytes when a non-JSON file type was
            requested and the response declares a matching content type.

        Raises:
            NetworkException: on transport failure, non-2xx status or
                undecodable response. `details` holds the original error.
            pydantic.ValidationError: if `options` is a mapping with unknown
                or invalid fields. Nothing is sent in that case.
        """
        if not isinstance(options, RequestOptions):
            options = RequestOptions.model_validate(dict(options))

        token = self.resolve_token(options)
        url = options.complete_url()
        headers = build_headers(options, token)
        body = serialize_body(options)

        try:
            response = self.http.request(
                options.method,
                url,
                headers=headers,
                data=body,
            )
            response.raise_for_status()
            return self._decode(options, response)
        except Exception as e:
            logger.error(f"Error occurred while fetching data: {e!r}")
            raise NetworkException.from_exception(e) from e

    def __call__(self, **kwargs: Any) -> Union[Any, bytes]:
        return self.invoke(kwargs)

    def close(self) -> None:
        """Release the HTTP client if this executor created it."""
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "ApiRequestExecutor":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _decode(self, options: RequestOptions, response: HttpResponse) -> Union[Any, bytes]:
        if not options.expects_json:
            content_type = response.header("Content-Type")
            if content_type is None:
                raise HttpError(
                    f"Response has no content-type header, expected {options.file_type}",
                    status_code=response.status_code,
                    response=response,
                )
            if options.file_type in content_type:
                return response.content
        return response.json()


def api_request(**kwargs: Any) -> Union[Any, bytes]:
    """
    Issue one request using the shared token_manager.

    Accepts the RequestOptions fields as keyword arguments, in snake_case or
    the camelCase aliases (fileType, queryParams, accessToken).
    """
    with ApiRequestExecutor(token_store=token_manager) as executor:
        return executor.invoke(kwargs)
