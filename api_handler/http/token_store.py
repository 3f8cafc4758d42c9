"""
Token Store

Holds the current bearer token in process memory.
"""

from __future__ import annotations

import threading
from typing import Optional


class TokenStore:
    """
    Single mutable slot for the access token.

    A fresh store holds an empty string. After clear_token() it holds None.
    The two are kept distinct: callers checking truthiness see the same
    result, but identity checks against None do not.

    Usage:
        store = TokenStore()
        store.set_token("abc")
        store.get_token()  # "abc"
        store.clear_token()
        store.get_token()  # None
    """

    def __init__(self, token: Optional[str] = "") -> None:
        self._token = token
        self._lock = threading.Lock()

    def set_token(self, token: Optional[str]) -> None:
        """Replace the stored token. No validation is applied."""
        with self._lock:
            self._token = token

    def get_token(self) -> Optional[str]:
        with self._lock:
            return self._token

    def clear_token(self) -> None:
        """Reset the stored token to None."""
        with self._lock:
            self._token = None

    def __repr__(self) -> str:
        with self._lock:
            state = "cleared" if self._token is None else "set"
        return f"TokenStore({state})"


# Default store shared by the module-level api_request helper
token_manager = TokenStore()
