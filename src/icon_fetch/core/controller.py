"""Lookup controller.

Orchestrates one lookup: normalize the input, build the icon URL, record the
lookup in history and then wait for the optional brand analysis. The
controller knows nothing about widgets; front ends read its state and
register an ``on_change`` listener to redraw.
"""

import logging
from collections.abc import Callable
from enum import Enum

from ..analysis.client import BrandAnalysisClient
from ..exceptions import InvalidDomainError
from ..history.store import HistoryStore
from ..messages import DEFAULT_LANGUAGE, get_message
from ..models import BrandAnalysis, LookupRecord
from .domain import normalize_domain
from .favicon import build_icon_url

logger = logging.getLogger(__name__)


class LookupState(Enum):
    """Lookup lifecycle states."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class LookupController:
    """
    Lookup state machine shared by the GUI and the CLI.

    IDLE -> LOADING -> READY | FAILED; READY and FAILED go back to LOADING on
    the next submission. The icon and the history update before the analysis
    request is awaited, so a result is visible while still LOADING.

    Analysis responses are applied in the order they resolve. A slow response
    for an earlier lookup overwrites the analysis of a newer one; there is no
    cancellation.

    Example:
        controller = LookupController(InMemoryHistoryStore(), BrandAnalysisClient())
        await controller.submit("https://www.github.com/")
        controller.current.domain  # 'github.com'
    """

    def __init__(
        self,
        history_store: HistoryStore,
        analysis_client: BrandAnalysisClient,
        icon_url_builder: Callable[[str], str] = build_icon_url,
        language: str = DEFAULT_LANGUAGE,
        on_change: Callable[["LookupController"], None] | None = None,
    ) -> None:
        """
        Initialize controller and load persisted history.

        Args:
            history_store: Store owning the persisted history
            analysis_client: Brand analysis client
            icon_url_builder: Maps a canonical domain to its icon URL
            language: Language for user-visible error messages
            on_change: Called with the controller after every state change
        """
        self.history_store = history_store
        self.analysis_client = analysis_client
        self.icon_url_builder = icon_url_builder
        self.language = language
        self.on_change = on_change

        self.state = LookupState.IDLE
        self.current: LookupRecord | None = None
        self.analysis: BrandAnalysis | None = None
        self.error: str | None = None
        self.history: list[LookupRecord] = history_store.load()

    @property
    def is_loading(self) -> bool:
        """Whether an analysis request is outstanding."""
        return self.state == LookupState.LOADING

    def _notify(self) -> None:
        if self.on_change:
            self.on_change(self)

    def begin_lookup(self, raw_input: str) -> LookupRecord | None:
        """
        Run the synchronous part of a submission.

        Args:
            raw_input: Address as typed by the user

        Returns:
            The new current record, or None if the lookup stopped here
            (empty input, invalid domain or history write failure)
        """
        if not raw_input:
            return None

        self.error = None
        self.analysis = None
        self.state = LookupState.LOADING

        try:
            domain = normalize_domain(raw_input)
        except InvalidDomainError:
            self.error = get_message("invalid_domain", self.language)
            self.state = LookupState.FAILED
            self._notify()
            return None

        record = LookupRecord.create(domain, self.icon_url_builder(domain))
        self.current = record

        try:
            self.history = self.history_store.upsert(record)
        except Exception as e:
            logger.error(f"Failed to store lookup for {domain}: {e}", exc_info=True)
            self.error = get_message("request_failed", self.language)
            self.state = LookupState.FAILED
            self._notify()
            return None

        logger.info(f"Looked up {domain}")
        self._notify()
        return record

    async def submit(self, raw_input: str) -> None:
        """
        Handle a user submission.

        Args:
            raw_input: Address as typed by the user
        """
        record = self.begin_lookup(raw_input)
        if record is None:
            return
        await self._resolve_analysis(record.domain)

    async def select(self, record: LookupRecord) -> None:
        """
        Re-display a history entry and request a fresh analysis.

        The entry is already canonical and already in history, so neither
        normalization nor history upsert runs.

        Args:
            record: History entry to display
        """
        self.current = record
        self.analysis = None
        self.error = None
        self.state = LookupState.LOADING
        self._notify()
        await self._resolve_analysis(record.domain)

    def clear_history(self) -> None:
        """Clear persisted history."""
        self.history_store.clear()
        self.history = []
        self._notify()

    async def _resolve_analysis(self, domain: str) -> None:
        analysis = await self.analysis_client.analyze(domain)
        if self.current is not None and self.current.domain != domain:
            logger.debug(f"Applying analysis for {domain} over newer lookup {self.current.domain}")
        self.analysis = analysis
        self.state = LookupState.READY
        self._notify()
