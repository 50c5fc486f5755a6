"""
Message formatting utilities
"""

from datetime import date
from typing import List
from todo_tracker.config.constants import (
    COLOR_BLUE,
    COLOR_GREEN,
    COLOR_RESET,
    STATUS_COMPLETED,
    STATUS_ONGOING,
    STATUS_PENDING,
)
from todo_tracker.models.task import Task
from todo_tracker.utils.date_utils import format_date


def task_status(task: Task, today: date) -> str:
    """
    Status label of a task

    Args:
        task: Task
        today: Current date

    Returns:
        "completed", "ongoing" (due today) or "pending"
    """
    if task.completed:
        return STATUS_COMPLETED
    if task.due_date == format_date(today):
        return STATUS_ONGOING
    return STATUS_PENDING


def format_task_line(position: int, task: Task, today: date, color: bool = True) -> str:
    """
    Format one row of the `list` output

    Args:
        position: 1-based position shown to the user
        task: Task
        today: Current date
        color: Wrap the check mark and date in ANSI colors

    Returns:
        Formatted line, e.g. "1.   [✔] buy milk - 2024-01-02 - completed"
    """
    if task.completed:
        icon = f"{COLOR_GREEN}✔{COLOR_RESET}" if color else "✔"
    else:
        icon = " "
    due = task.due_date or ""
    if color:
        due = f"{COLOR_BLUE}{due}{COLOR_RESET}"
    number = f"{position}."
    return f"{number:<4} [{icon}] {task.title} - {due} - {task_status(task, today)}"


def format_task_list(tasks: List[Task], today: date, color: bool = True) -> str:
    """Format the whole `list` output; empty collection gets a hint"""
    if not tasks:
        return "No tasks."
    return "\n".join(
        format_task_line(i + 1, task, today, color=color) for i, task in enumerate(tasks)
    )


def format_pending(tasks: List[Task]) -> str:
    """Format titles of uncompleted tasks"""
    if not tasks:
        return "Nothing pending."
    return "Pending todos:\n" + "\n".join(t.title for t in tasks)


def format_task_added(task: Task) -> str:
    return f"Added: {task.title} for {task.due_date}"


def format_task_completed(task: Task) -> str:
    return f"Completed: {task.title}"


def format_task_toggled(task: Task) -> str:
    state = "done" if task.completed else "not done"
    return f"Toggled: {task.title} ({state})"


def format_task_edited(task: Task) -> str:
    return f"Edited: {task.title}"


def format_task_deleted(task: Task) -> str:
    return f"Deleted: {task.title}"
