import logging

logger = logging.getLogger(__name__)


class Counter:
    """Monotonically increasing integer sequence.

    Each call to next() returns a value one higher than the previous call,
    starting from ``start + 1``.
    """

    def __init__(self, start: int) -> None:
        self._current = start

    @property
    def current(self) -> int:
        return self._current

    def next(self) -> int:
        self._current += 1
        logger.debug("Counter advanced to %s", self._current)
        return self._current


def counter(start: int) -> Counter:
    return Counter(start)
