"""Public API surface for the HTTP server and other presentation layers."""

from __future__ import annotations

from .registry import ApiFunction, call_api, get_api_functions, register_api
from .state import ApiState

# Import endpoints so decorators run at module import time.
from . import endpoints, meta  # noqa: F401

__all__ = ["ApiFunction", "ApiState", "call_api", "get_api_functions", "register_api"]
