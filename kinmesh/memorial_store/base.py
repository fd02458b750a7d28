from typing import List, Protocol

from kinmesh.domain.people import GuestbookEntry, Memorial


class MemorialStore(Protocol):
    """Protocol for memorial and guestbook storage implementations."""

    def get_memorial(self, memorial_id: str) -> Memorial:
        """Get a memorial by its ID."""
        ...

    def search_memorials(self, query: str, limit: int = 10) -> List[Memorial]:
        """Find published memorials whose deceased name contains the query."""
        ...

    def get_entries(self, memorial_id: str) -> List[GuestbookEntry]:
        """Get the visible guestbook entries of a memorial."""
        ...

    def search_entries_by_author(self, query: str) -> List[GuestbookEntry]:
        """Find visible entries of published memorials whose author name contains the query."""
        ...

    def add_memorial(self, memorial: Memorial) -> None:
        """Add or replace a memorial."""
        ...

    def add_entry(self, entry: GuestbookEntry) -> None:
        """Add a guestbook entry."""
        ...

    def save(self, filepath: str | None = None) -> None:
        """Save the store to disk."""
        ...
