"""icon-fetch: favicon lookup with AI brand analysis."""

__version__ = "0.1.0"
