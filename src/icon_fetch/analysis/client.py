"""Brand analysis client for the Gemini API.

Asks the model to infer a plausible visual brand identity for a domain from
general knowledge (no page is fetched) and parses the constrained JSON reply
into a BrandAnalysis. Every failure is absorbed here: callers only ever see a
BrandAnalysis or None.
"""

import json
import logging
import re
from typing import Any

from google import genai
from google.genai import types
from pydantic import ValidationError

from ..constants import DEFAULT_ANALYSIS_MODEL, DEFAULT_ANALYSIS_TEMPERATURE
from ..models import BrandAnalysis

logger = logging.getLogger(__name__)

RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "colors": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(type=types.Type.STRING),
            description="Dominant Hex color codes associated with the brand "
            "(e.g. ['#FFFFFF', '#000000'])",
        ),
        "style": types.Schema(
            type=types.Type.STRING,
            description="Design style (e.g., Minimalist, Flat, 3D, Corporate, Playful)",
        ),
        "brandIdentity": types.Schema(
            type=types.Type.STRING,
            description="A short paragraph describing what the brand represents visually.",
        ),
        "suggestedImprovements": types.Schema(
            type=types.Type.STRING,
            description="A suggestion for improving their icon design for "
            "high-resolution displays.",
        ),
    },
    required=["colors", "style", "brandIdentity", "suggestedImprovements"],
)

_FENCE_PATTERN = re.compile(r"^```(?:json)?\s*([\s\S]*?)\s*```$")


def build_prompt(domain: str) -> str:
    """Build the analysis prompt for a domain."""
    return (
        f'Analyze the visual brand identity of the website "{domain}". '
        "Even without seeing the live site, use your knowledge of this brand "
        "(or typical design patterns for this type of domain) to describe its favicon design. "
        "Return a JSON object representing its brand identity."
    )


def parse_analysis(text: str | None) -> BrandAnalysis | None:
    """
    Parse model output into a BrandAnalysis.

    Args:
        text: Raw response text (JSON, optionally wrapped in a code fence)

    Returns:
        Parsed analysis, or None if the text is empty, not JSON, or does not
        match the schema
    """
    text = (text or "").strip()
    if not text:
        return None

    match = _FENCE_PATTERN.match(text)
    if match:
        text = match.group(1).strip()

    try:
        return BrandAnalysis.model_validate(json.loads(text))
    except (json.JSONDecodeError, ValidationError) as e:
        logger.warning(f"Unparseable brand analysis response: {e}")
        return None


class BrandAnalysisClient:
    """
    Request brand analyses from Gemini.

    One request per call, no retry and no timeout escalation. Concurrent
    calls are independent.

    Example:
        client = BrandAnalysisClient(api_key="...")
        analysis = await client.analyze("github.com")
        if analysis:
            print(analysis.colors)
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_ANALYSIS_MODEL,
        temperature: float = DEFAULT_ANALYSIS_TEMPERATURE,
        enabled: bool = True,
        genai_client: Any = None,
    ) -> None:
        """
        Initialize client.

        Args:
            api_key: Gemini API key; analysis is unavailable without one
            model: Model name
            temperature: Sampling temperature
            enabled: Set False to never contact the service
            genai_client: Pre-built google-genai client (created lazily otherwise)
        """
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.enabled = enabled
        self._client = genai_client

    @property
    def available(self) -> bool:
        """Whether a request would be attempted."""
        return self.enabled and (self._client is not None or bool(self.api_key))

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def analyze(self, domain: str) -> BrandAnalysis | None:
        """
        Request a brand analysis for a domain.

        Args:
            domain: Canonical domain

        Returns:
            BrandAnalysis, or None if analysis is unavailable for any reason
        """
        if not self.enabled:
            logger.debug("Brand analysis disabled")
            return None

        if not self.available:
            logger.warning("No Gemini API key configured, skipping brand analysis")
            return None

        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=RESPONSE_SCHEMA,
            temperature=self.temperature,
        )

        try:
            client = self._get_client()
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=build_prompt(domain),
                config=config,
            )
            text = response.text
        except Exception as e:
            logger.error(f"Brand analysis request failed for {domain}: {e}")
            return None

        analysis = parse_analysis(text)
        if analysis is None:
            logger.warning(f"No usable brand analysis returned for {domain}")
        else:
            logger.info(f"Brand analysis received for {domain}")
        return analysis
