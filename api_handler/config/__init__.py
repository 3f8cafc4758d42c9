"""
Runtime Configuration Module
"""

from .runtime import (
    HttpConfig,
    RuntimeConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    "HttpConfig",
    "RuntimeConfig",
    "get_default_config",
    "set_default_config",
]
