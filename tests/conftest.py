"""Shared pytest fixtures for the full stringforge test suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from loguru import logger
import pytest

_FILES_DIR = Path(__file__).parent / "files"


@pytest.fixture(autouse=True)
def _reset_loguru_handlers() -> Iterator[None]:
    """Drop loguru handlers added during a test so sinks never outlive it."""

    yield
    logger.remove()


@pytest.fixture
def files_dir() -> Path:
    """Provide the directory holding Twine fixtures and expected outputs."""

    return _FILES_DIR


@pytest.fixture
def receipts_twine_path() -> Path:
    """Provide the canonical Twine fixture with simple and plural keys."""

    return _FILES_DIR / "receipts.twine"


@pytest.fixture
def loguru_messages() -> Iterator[list[str]]:
    """Capture loguru INFO+ messages emitted during a test."""

    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(str(message).rstrip("\n")),
        format="{message}",
        level="INFO",
    )
    yield messages
    logger.remove(handler_id)
