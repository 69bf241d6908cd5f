import logging
from typing import Optional

from .settings import LivesSettings

logger = logging.getLogger(__name__)


class LivesTracker:
    """Tracks the number of lives remaining in a game.

    Without a configured floor the remaining count keeps decreasing past
    zero; restart() always returns to the starting value.
    """

    def __init__(self, start: int, settings: Optional[LivesSettings] = None) -> None:
        self.settings = settings or LivesSettings()
        self._start = start
        self._left = start

    def died(self) -> None:
        left = self._left - 1
        floor = self.settings.floor
        if floor is not None and left < floor:
            logger.debug("Lives already at floor %s", floor)
            left = min(self._left, floor)
        self._left = left
        logger.debug("Life lost; %s remaining", self._left)

    def left(self) -> int:
        return self._left

    def restart(self) -> int:
        self._left = self._start
        logger.info("Lives restarted at %s", self._start)
        return self._start


def lives(start: int, settings: Optional[LivesSettings] = None) -> LivesTracker:
    return LivesTracker(start, settings)
