"""Bounded, deduplicated lookup history.

The whole history is kept as a single JSON array and rewritten on every
mutation. Subclasses only decide where that array lives.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import ValidationError

from ..constants import HISTORY_MAX_ENTRIES, HISTORY_STORAGE_KEY
from ..models import HISTORY_ADAPTER, LookupRecord

logger = logging.getLogger(__name__)


class HistoryStore(ABC):
    """
    Base class for history stores.

    Owns the in-memory sequence (most recent first, unique by domain, capped
    at ``max_entries``) and persists it through ``_read``/``_write``/``_remove``.
    """

    def __init__(self, max_entries: int = HISTORY_MAX_ENTRIES) -> None:
        """
        Initialize store.

        Args:
            max_entries: Maximum number of records kept
        """
        if max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self.max_entries = max_entries
        self._records: list[LookupRecord] = []

    @property
    def records(self) -> list[LookupRecord]:
        """Current history, most recent first."""
        return list(self._records)

    def load(self) -> list[LookupRecord]:
        """
        Load history from durable storage.

        Missing or unparseable data yields an empty history. A domain stored
        more than once keeps only its first (most recent) entry.

        Returns:
            Loaded records, most recent first
        """
        payload = self._read()
        if not payload:
            self._records = []
            return []

        try:
            records = HISTORY_ADAPTER.validate_json(payload)
        except ValidationError as e:
            logger.warning(f"Failed to parse stored history, starting empty: {e}")
            records = []

        seen: set[str] = set()
        unique = []
        for record in records:
            if record.domain not in seen:
                seen.add(record.domain)
                unique.append(record)

        self._records = unique[: self.max_entries]
        logger.debug(f"Loaded {len(self._records)} history record(s)")
        return self.records

    def upsert(self, record: LookupRecord) -> list[LookupRecord]:
        """
        Insert a record at the front, replacing any entry for the same domain.

        Args:
            record: Lookup record to store

        Returns:
            Updated history, most recent first
        """
        remaining = [r for r in self._records if r.domain != record.domain]
        updated = [record, *remaining][: self.max_entries]
        self._write(json.dumps([r.to_dict() for r in updated]))
        self._records = updated
        logger.debug(f"Stored {record.domain} in history ({len(updated)} record(s))")
        return self.records

    def clear(self) -> None:
        """Empty the history and remove the persisted entry."""
        self._remove()
        self._records = []
        logger.info("History cleared")

    @abstractmethod
    def _read(self) -> str | None:
        """Return the persisted JSON array, or None if absent."""
        ...

    @abstractmethod
    def _write(self, payload: str) -> None:
        """Persist the JSON array, replacing any previous value."""
        ...

    @abstractmethod
    def _remove(self) -> None:
        """Remove the persisted value entirely."""
        ...


class InMemoryHistoryStore(HistoryStore):
    """History store backed by a plain dict, for tests and one-off sessions."""

    def __init__(
        self,
        max_entries: int = HISTORY_MAX_ENTRIES,
        storage: dict[str, str] | None = None,
        key: str = HISTORY_STORAGE_KEY,
    ) -> None:
        super().__init__(max_entries)
        self.storage = storage if storage is not None else {}
        self.key = key

    def _read(self) -> str | None:
        return self.storage.get(self.key)

    def _write(self, payload: str) -> None:
        self.storage[self.key] = payload

    def _remove(self) -> None:
        self.storage.pop(self.key, None)


class FileHistoryStore(HistoryStore):
    """History store backed by a JSON file."""

    def __init__(self, path: Path | None = None, max_entries: int = HISTORY_MAX_ENTRIES) -> None:
        """
        Initialize file-based store.

        Args:
            path: History file (default: ~/.config/icon-fetch/history.json)
            max_entries: Maximum number of records kept
        """
        super().__init__(max_entries)
        if path is None:
            path = Path.home() / ".config" / "icon-fetch" / "history.json"
        self.path = path
        logger.debug(f"History file: {self.path}")

    def _read(self) -> str | None:
        if not self.path.exists():
            return None
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read history file {self.path}: {e}")
            return None

    def _write(self, payload: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(payload, encoding="utf-8")

    def _remove(self) -> None:
        self.path.unlink(missing_ok=True)
