"""
Command model for parsed CLI commands
"""

from typing import Optional
from pydantic import BaseModel
from enum import Enum


class ActionType(str, Enum):
    """Action types for commands"""
    ADD = "add"
    LIST = "list"
    PENDING = "pending"  # titles of uncompleted tasks
    COMPLETE = "complete"
    DELETE = "delete"
    TOGGLE = "toggle"
    EDIT = "edit"


# Actions that address a task by its position in the sorted list
INDEXED_ACTIONS = frozenset({ActionType.DELETE, ActionType.TOGGLE, ActionType.EDIT})


class ParsedCommand(BaseModel):
    """Command parsed from the command line"""

    action: ActionType
    title: Optional[str] = None
    position: Optional[int] = None  # 1-based, as printed by `list`

    @property
    def index(self) -> Optional[int]:
        """0-based index into the sorted collection"""
        if self.position is None:
            return None
        return self.position - 1

    def is_indexed(self) -> bool:
        """Check if command addresses a task by position"""
        return self.action in INDEXED_ACTIONS
