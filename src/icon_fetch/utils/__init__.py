"""Utility functions and helpers."""

from .http_utils import HTTPResult, safe_http_get, safe_http_get_content
from .logger import VerbosityLevel, setup_logger

__all__ = [
    "HTTPResult",
    "VerbosityLevel",
    "safe_http_get",
    "safe_http_get_content",
    "setup_logger",
]
