"""Tests for logging setup."""

import io
import logging

from npm_oidc_setup.log import configure_logging, log


def test_configure_logging_formats_records() -> None:
    stream = io.StringIO()
    configure_logging("DEBUG", stream=stream)

    logging.getLogger("npm_oidc_setup.workspace").debug("created %s", "dir")

    output = stream.getvalue()
    assert "[DEBG] created dir" in output
    assert len(log.handlers) == 1


def test_configure_logging_unknown_level_falls_back() -> None:
    stream = io.StringIO()
    configure_logging("chatty", stream=stream)

    assert log.level == logging.WARNING
    log.info("hidden")
    log.warning("shown")
    assert stream.getvalue().count("\n") == 1
    assert "[WARN] shown" in stream.getvalue()
