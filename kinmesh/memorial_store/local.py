import json
import logging
from pathlib import Path
from typing import List

from kinmesh.domain.people import GuestbookEntry, Memorial
from kinmesh.memorial_store.base import MemorialStore

logger = logging.getLogger(__name__)


class LocalMemorialStore(MemorialStore):
    """Local memorial store that keeps memorials and guestbook entries in a JSON file."""

    def __init__(self, filepath: str | Path | None = None) -> None:
        """Initialize LocalMemorialStore.

        Args:
            filepath: Path to store file. If provided and exists, will auto-load.
                     If provided and doesn't exist, will save to this path when save() is called.
                     If not provided, creates empty store in memory only.
        """
        self._filepath = str(filepath) if filepath else None

        if self._filepath and Path(self._filepath).exists():
            with open(self._filepath, "r") as f:
                data = json.load(f)
            self._memorials = {
                memorial_id: Memorial(**memorial_data)
                for memorial_id, memorial_data in data["memorials"].items()
            }
            self._entries = {
                memorial_id: [GuestbookEntry(**entry_data) for entry_data in entries]
                for memorial_id, entries in data.get("entries", {}).items()
            }
            logger.info(f"Loaded {len(self._memorials)} memorials from {self._filepath}")
        else:
            self._memorials = {}
            self._entries = {}

    @classmethod
    def from_data(
        cls,
        memorials: List[Memorial] | None = None,
        entries: List[GuestbookEntry] | None = None,
    ) -> "LocalMemorialStore":
        """Create an in-memory LocalMemorialStore from provided data (useful for testing)."""
        instance = cls(filepath=None)
        for memorial in memorials or []:
            instance.add_memorial(memorial)
        for entry in entries or []:
            instance.add_entry(entry)
        return instance

    def get_memorial(self, memorial_id: str) -> Memorial:
        """Get a memorial by its ID."""
        if memorial_id not in self._memorials:
            raise KeyError(f"Memorial {memorial_id} not found")
        return self._memorials[memorial_id]

    def search_memorials(self, query: str, limit: int = 10) -> List[Memorial]:
        """Find published memorials whose deceased name contains the query, case-insensitively."""
        query_lower = query.lower()
        matches = [
            memorial
            for memorial in self._memorials.values()
            if memorial.is_published and query_lower in memorial.deceased_full_name.lower()
        ]
        return matches[:limit]

    def get_entries(self, memorial_id: str) -> List[GuestbookEntry]:
        """Get the visible guestbook entries of a memorial, in insertion order."""
        return [entry for entry in self._entries.get(memorial_id, []) if not entry.is_hidden]

    def search_entries_by_author(self, query: str) -> List[GuestbookEntry]:
        """Find visible entries of published memorials whose author name contains the query."""
        query_lower = query.lower()
        matches = []
        for memorial_id, entries in self._entries.items():
            memorial = self._memorials.get(memorial_id)
            if memorial is None or not memorial.is_published:
                continue
            for entry in entries:
                if not entry.is_hidden and self._author_matches(entry, query_lower):
                    matches.append(entry)
        return matches

    @staticmethod
    def _author_matches(entry: GuestbookEntry, query_lower: str) -> bool:
        names = (entry.author_name, entry.author_first_name or "", entry.author_last_name or "")
        return any(query_lower in name.lower() for name in names)

    def add_memorial(self, memorial: Memorial) -> None:
        """Add or replace a memorial."""
        self._memorials[memorial.id] = memorial

    def add_entry(self, entry: GuestbookEntry) -> None:
        """Add a guestbook entry to its memorial."""
        if entry.memorial_id not in self._entries:
            self._entries[entry.memorial_id] = []
        self._entries[entry.memorial_id].append(entry)

    def save(self, filepath: str | None = None) -> None:
        """Save the memorial store to a JSON file.

        Args:
            filepath: Path to save to. If not provided, uses the filepath from initialization.
        """
        save_path = filepath or self._filepath
        if not save_path:
            raise ValueError(
                "No filepath provided and no default filepath set during initialization"
            )

        data = {
            "memorials": {
                memorial_id: memorial.model_dump()
                for memorial_id, memorial in self._memorials.items()
            },
            "entries": {
                memorial_id: [entry.model_dump() for entry in entries]
                for memorial_id, entries in self._entries.items()
            },
        }
        with open(str(save_path), "w") as f:
            json.dump(data, f)
