from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .settings import MessageSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MessageEntry:
    """A single recorded message.

    Attributes:
        seq: 1-based message id.
        text: Raw message text as passed to record().
        line: Formatted line returned to the caller, e.g. "[1] first message".
    """

    seq: int
    text: str
    line: str


class MessageLogger:
    """Numbers messages sequentially and keeps a bounded history.

    - Ids start at 1 and advance on every record() regardless of content.
    - The history holds at most ``capacity`` entries; the oldest are dropped.
    """

    def __init__(self, settings: Optional[MessageSettings] = None) -> None:
        self.settings = settings or MessageSettings()
        self._seq = 0
        self._entries: List[MessageEntry] = []

    @property
    def sequence(self) -> int:
        return self._seq

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, text: str) -> str:
        self._seq += 1
        line = self.settings.template.format(seq=self._seq, text=text)
        self._entries.append(MessageEntry(seq=self._seq, text=text, line=line))
        if len(self._entries) > self.settings.capacity:
            dropped = len(self._entries) - self.settings.capacity
            del self._entries[0:dropped]
            logger.debug("Message history full, dropped=%d old entries", dropped)
        logger.debug("Recorded message: %s", line)
        return line

    def entries(self) -> List[MessageEntry]:
        return list(self._entries)

    def recent(self, n: int) -> List[str]:
        if n <= 0:
            return []
        return [e.line for e in self._entries[-n:]]


def messages(settings: Optional[MessageSettings] = None) -> MessageLogger:
    return MessageLogger(settings)
