"""Unit tests for /src/core/log_config.py"""

import sys
from pathlib import Path
from typing import Generator

import pytest
from loguru import logger

from src.core.log_config import configure_logging


@pytest.fixture
def restore_default_sink() -> Generator[None, None, None]:
    """configure_logging() throws away all sinks. Put a plain stderr sink back afterwards."""
    try:
        yield
    finally:
        logger.remove()
        logger.add(lambda message: sys.stderr.write(message))


def test_logging_to_a_file(tmp_path: Path, restore_default_sink: None) -> None:
    log_file = tmp_path / "checkers.log"
    configure_logging("INFO", str(log_file))
    logger.info("black won")
    logger.debug("too chatty to show up")
    # removing the sink closes (and flushes) the file
    logger.remove()

    contents = log_file.read_text()
    assert "black won" in contents
    assert "too chatty" not in contents


def test_logging_to_stderr(
    capsys: pytest.CaptureFixture[str], restore_default_sink: None
) -> None:
    configure_logging("WARNING")
    logger.warning("white has no legal move left")
    logger.info("not shown")
    captured = capsys.readouterr()
    assert "white has no legal move left" in captured.err
    assert "not shown" not in captured.err
