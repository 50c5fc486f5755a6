"""
In-memory ordered task collection used by the CLI
"""

from datetime import date, datetime
from typing import Iterator, List, Optional
from todo_tracker.models.task import Task
from todo_tracker.utils.date_utils import format_date, get_current_datetime
from todo_tracker.utils.error_handler import InvalidIndexError, NotFoundError


class TaskList:
    """Ordered collection of tasks with index- and title-based mutations"""

    def __init__(self, tasks: Optional[List[Task]] = None):
        """
        Initialize task list

        Args:
            tasks: Initial tasks, kept in the given order (list is not copied)
        """
        self.tasks: List[Task] = tasks if tasks is not None else []

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __getitem__(self, index: int) -> Task:
        self._validate_index(index)
        return self.tasks[index]

    def _validate_index(self, index: int) -> None:
        if index < 0 or index >= len(self.tasks):
            raise InvalidIndexError(index, len(self.tasks))

    def add(self, title: str, today: date, now: Optional[datetime] = None) -> Task:
        """
        Append a new uncompleted task due today

        Args:
            title: Task title (duplicates allowed)
            today: Due date of the new task
            now: Creation timestamp (defaults to current time)

        Returns:
            The new task
        """
        task = Task(
            title=title,
            completed=False,
            due_date=format_date(today),
            created_at=now or get_current_datetime(),
        )
        self.tasks.append(task)
        return task

    def list(self) -> List[Task]:
        return self.tasks

    def sorted(self) -> List[Task]:
        """
        Sort in place by due date, then title

        Index-based commands call this first so positions match `list` output.
        Missing dates sort first.
        """
        self.tasks.sort(key=lambda t: (t.due_date or "", t.title))
        return self.tasks

    def pending(self) -> List[Task]:
        """Tasks that are not completed yet, in collection order"""
        return [t for t in self.tasks if not t.completed]

    def complete(self, title: str, now: Optional[datetime] = None) -> Task:
        """
        Mark the first task with exactly this title as completed

        Later tasks with the same title are not touched.

        Raises:
            NotFoundError: If no task has this title
        """
        for task in self.tasks:
            if task.title == title:
                task.set_completed(True, now or get_current_datetime())
                return task
        raise NotFoundError(f"task not found: {title}")

    def toggle(self, index: int, now: Optional[datetime] = None) -> Task:
        """
        Flip completion of the task at `index`

        Raises:
            InvalidIndexError: If index is out of range
        """
        self._validate_index(index)
        task = self.tasks[index]
        task.set_completed(not task.completed, now or get_current_datetime())
        return task

    def edit(self, index: int, title: str) -> Task:
        """
        Replace the title of the task at `index`

        Raises:
            InvalidIndexError: If index is out of range
        """
        self._validate_index(index)
        task = self.tasks[index]
        task.title = title
        return task

    def delete(self, index: int) -> Task:
        """
        Remove the task at `index`; later tasks shift down by one

        Raises:
            InvalidIndexError: If index is out of range
        """
        self._validate_index(index)
        return self.tasks.pop(index)
