"""Renderers for lookup results and history.

Both renderers implement BaseRenderer and know nothing about how a lookup
was performed.
"""

from .base import BaseRenderer
from .cli_renderer import CLIRenderer
from .json_renderer import JSONRenderer

__all__ = ["BaseRenderer", "CLIRenderer", "JSONRenderer"]
