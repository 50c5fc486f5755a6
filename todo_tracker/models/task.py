"""
Task models
"""

from typing import Optional
from datetime import datetime
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator


class TodoItem(BaseModel):
    """Fields and completion bookkeeping shared by CLI tasks and service todos"""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    completed: bool = False
    created_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    def set_completed(self, completed: bool, now: datetime) -> None:
        """
        Set completion flag and keep completed_at consistent

        A false -> true transition stamps completed_at with `now`,
        any transition to false clears it.

        Args:
            completed: New completion flag
            now: Timestamp used for a false -> true transition
        """
        if completed and not self.completed:
            self.completed_at = now
        elif not completed:
            self.completed_at = None
        self.completed = completed


class Task(TodoItem):
    """Task persisted by the CLI (older files used `task` and `date` keys)"""

    title: str = Field(validation_alias=AliasChoices("title", "task"))
    due_date: Optional[str] = Field(
        None, validation_alias=AliasChoices("due_date", "date")
    )


class Todo(TodoItem):
    """Todo kept in memory by the HTTP service"""

    id: int
    created_at: datetime


class TodoCreate(BaseModel):
    """Body of POST /todos"""

    title: StrictStr

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be empty")
        return value


class TodoUpdate(BaseModel):
    """Body of PUT /todos/{id}"""

    completed: StrictBool  # "true", 1 and similar are rejected
