"""Core lookup logic: domain normalization, icon URLs and the lookup controller."""

from .controller import LookupController, LookupState
from .domain import normalize_domain
from .favicon import build_icon_url

__all__ = [
    "LookupController",
    "LookupState",
    "build_icon_url",
    "normalize_domain",
]
