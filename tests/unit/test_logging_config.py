"""Tests for loguru setup."""

from collections.abc import Iterator

import pytest
from loguru import logger

from hn_companion.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _reset_logger() -> Iterator[None]:
    yield
    logger.remove()


def test_cli_logging_goes_to_stderr_at_info(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging()

    logger.debug("hidden detail")
    logger.info("Saved output")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Saved output" in captured.err
    assert "hidden detail" not in captured.err


def test_verbose_enables_debug(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(verbose=True)

    logger.debug("merge counts")

    assert "merge counts" in capsys.readouterr().err


def test_server_logging_keeps_stdout_clean_and_adds_origin(
    capsys: pytest.CaptureFixture[str],
) -> None:
    configure_logging(server=True)

    logger.warning("cache miss")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "| WARNING  |" in captured.err
    assert "test_logging_config:" in captured.err
    assert "\x1b[" not in captured.err
