"""
In-memory todo store for the HTTP service
"""

import threading
from typing import List
from todo_tracker.models.task import Todo
from todo_tracker.utils.date_utils import get_current_datetime
from todo_tracker.utils.error_handler import NotFoundError
from todo_tracker.utils.logger import logger


class MemoryStore:
    """
    Process-wide todo collection guarded by one lock

    Every public method holds the lock for its whole duration. Ids come
    from a counter that only grows, so an id is never handed out twice
    even after deletions.
    """

    def __init__(self):
        """Initialize an empty store"""
        self._todos: List[Todo] = []
        self._next_id = 1
        self._lock = threading.Lock()
        self.logger = logger

    def add(self, title: str) -> Todo:
        """
        Add a new todo

        Args:
            title: Todo title

        Returns:
            Copy of the created todo
        """
        with self._lock:
            todo = Todo(
                id=self._next_id,
                title=title,
                completed=False,
                created_at=get_current_datetime(),
            )
            self._next_id += 1
            self._todos.append(todo)
            self.logger.debug(f"Todo added id={todo.id} title={title!r}")
            return todo.model_copy()

    def list(self) -> List[Todo]:
        """Snapshot of all todos in insertion order"""
        with self._lock:
            return [todo.model_copy() for todo in self._todos]

    def update(self, todo_id: int, completed: bool) -> Todo:
        """
        Set completion of a todo

        Raises:
            NotFoundError: If no todo has this id
        """
        with self._lock:
            for todo in self._todos:
                if todo.id == todo_id:
                    todo.set_completed(completed, get_current_datetime())
                    self.logger.debug(f"Todo updated id={todo_id} completed={completed}")
                    return todo.model_copy()
            raise NotFoundError(f"todo {todo_id} not found")

    def delete(self, todo_id: int) -> None:
        """
        Delete a todo by id

        Raises:
            NotFoundError: If no todo has this id
        """
        with self._lock:
            for i, todo in enumerate(self._todos):
                if todo.id == todo_id:
                    del self._todos[i]
                    self.logger.debug(f"Todo deleted id={todo_id}")
                    return
            raise NotFoundError(f"todo {todo_id} not found")

    def count(self) -> int:
        with self._lock:
            return len(self._todos)
