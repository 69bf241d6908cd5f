import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s: %(message)s"


def configure_logging(
    level: int = logging.INFO,
    stream: Optional[TextIO] = None,
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """Install a single stream handler on the root logger (or ``logger_name``).

    Existing handlers on that logger are removed first, so calling this
    repeatedly never duplicates output.
    """
    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    target = logging.getLogger(logger_name)
    target.setLevel(level)
    for h in list(target.handlers):
        target.removeHandler(h)
    target.addHandler(handler)
    return target
