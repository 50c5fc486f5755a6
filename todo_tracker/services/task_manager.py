"""
Task management service
"""

from datetime import date
from pathlib import Path
from typing import Callable, List, Optional
from todo_tracker.models.command import ActionType, ParsedCommand
from todo_tracker.models.task import Task
from todo_tracker.services.postponement import postpone_tasks
from todo_tracker.services.storage import JsonStorage
from todo_tracker.services.task_list import TaskList
from todo_tracker.services.title_handler import TitleHandler
from todo_tracker.utils.date_utils import get_today
from todo_tracker.utils.error_handler import InvalidInputError
from todo_tracker.utils.logger import logger
from todo_tracker.utils.formatters import (
    format_pending,
    format_task_added,
    format_task_completed,
    format_task_deleted,
    format_task_edited,
    format_task_list,
    format_task_toggled,
)


class TaskManager:
    """
    Runs one CLI command against the task file

    Every call follows the same cycle: load the file, apply postponement
    (saving right away if it changed anything), sort when the command
    addresses a task by position, mutate, save.
    """

    def __init__(
        self,
        todo_file: str | Path,
        today_provider: Callable[[], date] = get_today,
        color: bool = True,
    ):
        """
        Initialize task manager

        Args:
            todo_file: Path to the JSON task file
            today_provider: Returns the current date (overridable in tests)
            color: Use ANSI colors in `list` output
        """
        self.storage: JsonStorage[List[Task]] = JsonStorage(todo_file, List[Task])
        self.today_provider = today_provider
        self.color = color
        self.title_handler = TitleHandler()
        self.logger = logger

    def load(self) -> TaskList:
        """
        Load tasks and apply postponement

        Returns:
            Task list in file order
        """
        tasks = self.storage.load(default=[])
        if postpone_tasks(tasks, self.today_provider()):
            self.logger.info("Due dates normalized, saving before running command")
            self.storage.save(tasks)
        return TaskList(tasks)

    def save(self, task_list: TaskList) -> None:
        self.storage.save(task_list.list())

    def add(self, title: str) -> Task:
        title = self.title_handler.for_storage(title)
        task_list = self.load()
        task = task_list.add(title, self.today_provider())
        self.save(task_list)
        self.logger.info(f"Task added: '{task.title}' due {task.due_date}")
        return task

    def list(self) -> List[Task]:
        """Tasks sorted by due date, then title"""
        return self.load().sorted()

    def pending(self) -> List[Task]:
        return self.load().pending()

    def complete(self, title: str) -> Task:
        title = self.title_handler.for_lookup(title)
        task_list = self.load()
        task = task_list.complete(title)
        self.save(task_list)
        self.logger.info(f"Task completed: '{task.title}'")
        return task

    def toggle(self, index: int) -> Task:
        task_list = self.load()
        task_list.sorted()
        task = task_list.toggle(index)
        self.save(task_list)
        self.logger.info(f"Task toggled: '{task.title}' completed={task.completed}")
        return task

    def edit(self, index: int, title: str) -> Task:
        title = self.title_handler.for_storage(title)
        task_list = self.load()
        task_list.sorted()
        task = task_list.edit(index, title)
        self.save(task_list)
        self.logger.info(f"Task {index} renamed to '{task.title}'")
        return task

    def delete(self, index: int) -> Task:
        task_list = self.load()
        task_list.sorted()
        task = task_list.delete(index)
        self.save(task_list)
        self.logger.info(f"Task deleted: '{task.title}'")
        return task

    def execute(self, command: ParsedCommand) -> str:
        """
        Execute a parsed command

        Args:
            command: Parsed command

        Returns:
            Message to print

        Raises:
            TodoError: If the command is invalid or fails
        """
        action = command.action

        if command.is_indexed() and command.index is None:
            raise InvalidInputError(f"'{action.value}' needs a task number")

        if action == ActionType.ADD:
            return format_task_added(self.add(command.title or ""))

        elif action == ActionType.LIST:
            return format_task_list(self.list(), self.today_provider(), color=self.color)

        elif action == ActionType.PENDING:
            return format_pending(self.pending())

        elif action == ActionType.COMPLETE:
            return format_task_completed(self.complete(command.title or ""))

        elif action == ActionType.TOGGLE:
            return format_task_toggled(self.toggle(command.index))

        elif action == ActionType.EDIT:
            return format_task_edited(self.edit(command.index, command.title or ""))

        elif action == ActionType.DELETE:
            return format_task_deleted(self.delete(command.index))

        raise InvalidInputError(f"unknown command: {action}")
