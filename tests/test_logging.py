import io
import logging

from closures import counter
from closures.utils.logging import configure_logging


def test_configure_logging_replaces_handlers():
    name = "closures.test_configure"
    configure_logging(logging.DEBUG, logger_name=name)
    target = configure_logging(logging.DEBUG, logger_name=name)
    assert len(target.handlers) == 1
    assert target.level == logging.DEBUG


def test_handle_activity_is_logged_to_stream():
    buf = io.StringIO()
    target = configure_logging(logging.DEBUG, stream=buf, logger_name="closures.counter")
    try:
        counter(0).next()
    finally:
        for h in list(target.handlers):
            target.removeHandler(h)
        target.setLevel(logging.NOTSET)

    out = buf.getvalue()
    assert "Counter advanced to 1" in out
    assert "| DEBUG    | closures.counter:" in out
