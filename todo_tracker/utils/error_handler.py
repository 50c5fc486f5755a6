"""
Error handling utilities
"""

from typing import Optional
from todo_tracker.models.response import ErrorResponse
from todo_tracker.utils.logger import logger


class TodoError(Exception):
    """Base exception for todo errors"""

    error_code = "todo_error"

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        if error_code is not None:
            self.error_code = error_code
        super().__init__(self.message)


class ValidationError(TodoError):
    """Validation error exception"""
    error_code = "validation_error"


class InvalidIndexError(ValidationError):
    """Index outside of the task collection"""
    error_code = "invalid_index"

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"no task #{index + 1} (there are {length} tasks)")


class InvalidInputError(ValidationError):
    """Empty or malformed input"""
    error_code = "invalid_input"


class NotFoundError(TodoError):
    """No task matches the given title or id"""
    error_code = "not_found"


class PersistenceError(TodoError):
    """Reading or writing the task file failed"""
    error_code = "persistence_error"


def handle_error(error: Exception) -> ErrorResponse:
    """
    Handle error and return user-friendly message

    Args:
        error: Exception to handle

    Returns:
        ErrorResponse with user-friendly message
    """
    if isinstance(error, PersistenceError):
        logger.error(f"Persistence failure: {error}", exc_info=True)
        return ErrorResponse(
            message=f"Storage error: {error.message}",
            error_code=error.error_code,
        )

    if isinstance(error, TodoError):
        logger.info(f"Operation rejected ({error.error_code}): {error.message}")
        return ErrorResponse(
            message=error.message,
            error_code=error.error_code,
        )

    logger.error(f"Unexpected error: {error}", exc_info=True)

    # Generic error message
    return ErrorResponse(
        message="Unexpected error. See the log for details.",
        error_code="internal_error",
    )


def format_error_message(error: Exception) -> str:
    """
    Format error message for user

    Args:
        error: Exception to format

    Returns:
        User-friendly error message
    """
    error_response = handle_error(error)
    return f"Error: {error_response.message}"
