"""Session-scoped translation history."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Iterator

HISTORY_DISPLAY_LIMIT = 10


@dataclass(frozen=True)
class HistoryEntry:
    """One completed translation."""

    id: str
    original_text: str
    translated_text: str
    source_language: str
    target_language: str
    timestamp: datetime


class TranslationHistory:
    """Newest-first list of :class:`HistoryEntry` records held in memory.

    Entry ids are millisecond timestamps taken from ``clock``. Two entries
    recorded within the same millisecond (or after the clock steps back) get
    the previous id plus one, so ids stay unique and increase in recording
    order.
    """

    def __init__(self, *, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._entries: list[HistoryEntry] = []
        self._last_id = 0

    def _next_id(self, now: datetime) -> str:
        candidate = int(now.timestamp() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return str(candidate)

    def record(
        self,
        *,
        original_text: str,
        translated_text: str,
        source_language: str,
        target_language: str,
    ) -> HistoryEntry:
        now = self._clock()
        entry = HistoryEntry(
            id=self._next_id(now),
            original_text=original_text,
            translated_text=translated_text,
            source_language=source_language,
            target_language=target_language,
            timestamp=now,
        )
        self._entries.insert(0, entry)
        return entry

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def recent(self, limit: int = HISTORY_DISPLAY_LIMIT) -> tuple[HistoryEntry, ...]:
        """Return at most ``limit`` entries, newest first."""

        if limit < 0:
            raise ValueError("limit must not be negative")
        return tuple(self._entries[:limit])

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(tuple(self._entries))


__all__ = ["HISTORY_DISPLAY_LIMIT", "HistoryEntry", "TranslationHistory"]
