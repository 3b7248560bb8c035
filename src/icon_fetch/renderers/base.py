"""Base renderer."""

from abc import ABC, abstractmethod

from ..messages import DEFAULT_LANGUAGE
from ..models import BrandAnalysis, LookupRecord
from ..utils.logger import VerbosityLevel


class BaseRenderer(ABC):
    """Base class for all output renderers."""

    def __init__(
        self,
        verbosity: VerbosityLevel = VerbosityLevel.NORMAL,
        language: str = DEFAULT_LANGUAGE,
    ):
        """
        Initialize renderer.

        Args:
            verbosity: Output verbosity level
            language: Language for labels
        """
        self.verbosity = verbosity
        self.language = language

    @abstractmethod
    def render_lookup(self, record: LookupRecord, analysis: BrandAnalysis | None) -> None:
        """
        Render a lookup result.

        Args:
            record: Lookup record
            analysis: Brand analysis, or None when unavailable
        """
        ...

    @abstractmethod
    def render_history(self, records: list[LookupRecord]) -> None:
        """
        Render lookup history.

        Args:
            records: History records, most recent first
        """
        ...
