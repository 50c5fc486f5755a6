"""
Task title handling
"""

from todo_tracker.utils.error_handler import InvalidInputError
from todo_tracker.utils.logger import logger

# Longest title accepted from the command line
MAX_TITLE_LENGTH = 4096


class TitleHandler:
    """
    Turns command-line text into task titles

    New titles (add, edit) are cleaned before they are stored. Lookup
    titles (complete) are only trimmed, so they still match titles that
    were stored with repeated spaces by older or hand-edited files.
    """

    def __init__(self):
        self.logger = logger

    def for_storage(self, text: str) -> str:
        """
        Clean a title that is about to be stored

        Surrounding whitespace is dropped and runs of whitespace become
        one space, which also folds newlines and tabs into the title line.

        Raises:
            InvalidInputError: If the title is empty or longer than MAX_TITLE_LENGTH
        """
        title = " ".join(text.split())
        if not title:
            raise InvalidInputError("task title is empty")
        if len(title) > MAX_TITLE_LENGTH:
            raise InvalidInputError(f"task title is longer than {MAX_TITLE_LENGTH} characters")
        if title != text:
            self.logger.debug(f"Title cleaned: {text!r} -> {title!r}")
        return title

    def for_lookup(self, text: str) -> str:
        """
        Prepare a title used to find an existing task

        Raises:
            InvalidInputError: If nothing but whitespace was given
        """
        title = text.strip()
        if not title:
            raise InvalidInputError("task title is empty")
        return title
