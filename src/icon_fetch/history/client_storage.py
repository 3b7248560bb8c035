"""Flet client storage based history store.

In a browser session Flet client storage is the origin-scoped localStorage,
so history survives page reloads exactly like the web version of the tool.
"""

import logging
from typing import TYPE_CHECKING

from ..constants import HISTORY_MAX_ENTRIES, HISTORY_STORAGE_KEY
from .store import HistoryStore

if TYPE_CHECKING:
    import flet as ft

logger = logging.getLogger(__name__)


class ClientStorageHistoryStore(HistoryStore):
    """Persist history under a single key in Flet client storage."""

    def __init__(
        self,
        page: "ft.Page",
        key: str = HISTORY_STORAGE_KEY,
        max_entries: int = HISTORY_MAX_ENTRIES,
    ) -> None:
        """
        Initialize client storage history store.

        Args:
            page: Flet page with client_storage access
            key: Storage key holding the JSON array
            max_entries: Maximum number of records kept
        """
        super().__init__(max_entries)
        self.page = page
        self.key = key
        logger.debug(f"Client storage history store initialized (key: {key})")

    def _read(self) -> str | None:
        value = self.page.client_storage.get(self.key)
        if value is not None and not isinstance(value, str):
            logger.warning(f"Unexpected history value type in client storage: {type(value)}")
            return None
        return value

    def _write(self, payload: str) -> None:
        self.page.client_storage.set(self.key, payload)

    def _remove(self) -> None:
        if self.page.client_storage.contains_key(self.key):
            self.page.client_storage.remove(self.key)
