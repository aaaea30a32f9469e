"""Shared pytest fixtures for cppdoc tests."""

import pytest

from cppdoc.comment import DocComment
from cppdoc.config import get_settings
from cppdoc.source import SourceBuffer

TEST_FILE = "test.hpp"


@pytest.fixture
def make_buffer():
    """
    Factory fixture building a SourceBuffer named test.hpp.

    Example:
        def test_something(make_buffer):
            buffer = make_buffer("int x;\\n")
    """

    def _make(text: str) -> SourceBuffer:
        return SourceBuffer.from_text(text, name=TEST_FILE)

    return _make


@pytest.fixture
def empty_comment():
    """A comment with no brief and no sections."""
    return DocComment()


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached environment settings around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
