"""Bounded, scrollable chat log shared between the network listener and the screen."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from typing import Optional

CHAT_LOG_SIZE = 100
MAX_ENTRY_BYTES = 127
VISIBLE_LINES = 10


def _truncate_utf8(text: str, limit: int) -> str:
    """Cut ``text`` so its UTF-8 form fits in ``limit`` bytes, never splitting a character."""
    limit = max(limit, 0)
    data = text.encode("utf-8")
    if len(data) <= limit:
        return text
    return data[:limit].decode("utf-8", errors="ignore")


@dataclass(frozen=True)
class ChatEntry:
    """One line of the chat log, optionally drawn in a colour pair."""

    text: str
    color_pair: Optional[int] = None


class ChatLog:
    """Keeps the newest messages, oldest dropped first, with a scroll offset."""

    def __init__(self, capacity: int = CHAT_LOG_SIZE) -> None:
        self._entries: deque[ChatEntry] = deque(maxlen=capacity)
        self._scroll_offset = 0
        self._lock = threading.Lock()

    @property
    def scroll_offset(self) -> int:
        return self._scroll_offset

    @property
    def entries(self) -> list[ChatEntry]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def _push(self, entry: ChatEntry) -> None:
        with self._lock:
            self._entries.append(entry)
            self._scroll_offset = 0

    def append(self, msg: str) -> ChatEntry:
        """Add a plain message and jump back to the newest lines."""
        entry = ChatEntry(_truncate_utf8(msg, MAX_ENTRY_BYTES))
        self._push(entry)
        return entry

    def append_colored(self, msg: str, color_pair: int) -> ChatEntry:
        """Add a message drawn in ``color_pair``.

        The colour marker shares the entry's byte budget with the text.
        """
        marker_bytes = len(f"\x01{color_pair}\x01".encode("utf-8"))
        entry = ChatEntry(_truncate_utf8(msg, MAX_ENTRY_BYTES - marker_bytes), color_pair)
        self._push(entry)
        return entry

    def scroll_up(self) -> None:
        """Show older lines, as long as some remain."""
        with self._lock:
            if self._scroll_offset + 1 < len(self._entries):
                self._scroll_offset += 1

    def scroll_down(self) -> None:
        """Show newer lines."""
        with self._lock:
            if self._scroll_offset > 0:
                self._scroll_offset -= 1

    def visible(self, lines: int = VISIBLE_LINES) -> list[ChatEntry]:
        """Return the entries in the window that the screen draws."""
        with self._lock:
            entries = list(self._entries)
            offset = self._scroll_offset
        count = len(entries)
        start = count - lines - offset if count > lines else 0
        first = max(start, 0)
        last = min(start + lines, count)
        return entries[first:last] if last > first else []