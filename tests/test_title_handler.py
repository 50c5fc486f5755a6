"""
Tests for task title handling
"""

import pytest
from todo_tracker.services.title_handler import MAX_TITLE_LENGTH, TitleHandler
from todo_tracker.utils.error_handler import InvalidInputError


@pytest.fixture
def title_handler():
    return TitleHandler()


def test_storage_title_is_cleaned(title_handler):
    """Test new titles are trimmed with whitespace runs folded"""
    assert title_handler.for_storage("  write \t report\n") == "write report"


def test_lookup_title_is_only_trimmed(title_handler):
    """Test lookup titles keep inner whitespace"""
    assert title_handler.for_lookup("  buy  milk ") == "buy  milk"


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_blank_titles_rejected(title_handler, text):
    """Test blank titles are rejected for storage and lookup"""
    with pytest.raises(InvalidInputError):
        title_handler.for_storage(text)
    with pytest.raises(InvalidInputError):
        title_handler.for_lookup(text)


def test_long_title_rejected(title_handler):
    """Test titles over the length limit are rejected"""
    assert title_handler.for_storage("x" * MAX_TITLE_LENGTH) == "x" * MAX_TITLE_LENGTH

    with pytest.raises(InvalidInputError):
        title_handler.for_storage("x" * (MAX_TITLE_LENGTH + 1))
