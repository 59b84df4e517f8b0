"""
Pytest configuration for term-mouse tests.
"""

import logging
from pathlib import Path
from typing import Callable, Generator

import pytest


@pytest.fixture(autouse=True)
def reset_term_mouse_logger() -> Generator[None, None, None]:
    """Undo handlers installed by the CLI so they don't leak between tests."""
    logger = logging.getLogger("term_mouse")
    level = logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    def _write(text: str) -> Path:
        path = tmp_path / "config.toml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def config_warnings(
    caplog: pytest.LogCaptureFixture,
) -> Callable[[], list[logging.LogRecord]]:
    """Return a callable listing the config warnings logged so far."""
    caplog.set_level(logging.WARNING, logger="term_mouse")

    def _warnings() -> list[logging.LogRecord]:
        return [
            record
            for record in caplog.records
            if record.levelno == logging.WARNING and record.name.startswith("term_mouse")
        ]

    return _warnings
