"""Lookup history stores."""

from .client_storage import ClientStorageHistoryStore
from .store import FileHistoryStore, HistoryStore, InMemoryHistoryStore

__all__ = [
    "ClientStorageHistoryStore",
    "FileHistoryStore",
    "HistoryStore",
    "InMemoryHistoryStore",
]
