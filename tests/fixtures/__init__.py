"""
Test fixtures package for API handler tests.

Usage:
    from fixtures import make_json_response, make_http_client

    def test_something():
        client = make_http_client(make_json_response({"id": 1}))
"""

from .http_fixtures import (
    make_fake_response,
    make_json_response,
    make_fake_session,
    make_http_client,
    sent_request,
)

__all__ = [
    "make_fake_response",
    "make_json_response",
    "make_fake_session",
    "make_http_client",
    "sent_request",
]
