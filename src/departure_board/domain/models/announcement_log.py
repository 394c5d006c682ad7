"""Announcement log domain model."""

from collections import deque

DEFAULT_ANNOUNCEMENT_LIMIT = 6


class AnnouncementLog:
    """Newest-first log of formatted announcements, capped in size.

    Entries past the cap are dropped silently, oldest first.
    """

    def __init__(
        self, limit: int = DEFAULT_ANNOUNCEMENT_LIMIT, entries: list[str] | None = None
    ) -> None:
        if limit < 1:
            raise ValueError("announcement limit must be at least 1")
        self.limit = limit
        self._entries: deque[str] = deque(maxlen=limit)
        # Stored newest first, so load oldest first
        for entry in reversed((entries or [])[:limit]):
            self._entries.appendleft(entry)

    def add(self, entry: str) -> None:
        """Prepend an entry, dropping the oldest one past the limit."""
        self._entries.appendleft(entry)

    def clear(self) -> None:
        self._entries.clear()

    @property
    def entries(self) -> list[str]:
        """Entries, newest first."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self.entries)
