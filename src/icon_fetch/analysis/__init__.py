"""AI brand analysis."""

from .client import RESPONSE_SCHEMA, BrandAnalysisClient, build_prompt, parse_analysis

__all__ = ["RESPONSE_SCHEMA", "BrandAnalysisClient", "build_prompt", "parse_analysis"]
