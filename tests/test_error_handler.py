"""
Tests for error handling utilities
"""

from todo_tracker.utils.error_handler import (
    InvalidIndexError,
    NotFoundError,
    PersistenceError,
    ValidationError,
    format_error_message,
    handle_error,
)


def test_invalid_index_is_validation_error():
    """Test index errors are validation errors with a stable code"""
    error = InvalidIndexError(5, 3)

    assert isinstance(error, ValidationError)
    assert handle_error(error).error_code == "invalid_index"
    assert format_error_message(error) == "Error: no task #6 (there are 3 tasks)"


def test_not_found_message():
    """Test not found errors keep their message"""
    response = handle_error(NotFoundError("task not found: x"))

    assert response.message == "task not found: x"
    assert response.error_code == "not_found"


def test_persistence_error_message():
    """Test storage errors are labelled as such"""
    response = handle_error(PersistenceError("cannot read todos.json"))

    assert response.message == "Storage error: cannot read todos.json"
    assert response.error_code == "persistence_error"


def test_unexpected_error_is_generic():
    """Test unknown exceptions do not leak details"""
    response = handle_error(RuntimeError("boom"))

    assert response.error_code == "internal_error"
    assert "boom" not in response.message
