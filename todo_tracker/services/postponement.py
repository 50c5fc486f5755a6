"""
Postponement of overdue tasks
"""

from datetime import date
from typing import List
from todo_tracker.models.task import Task
from todo_tracker.utils.date_utils import format_date, get_tomorrow, parse_due_date
from todo_tracker.utils.logger import logger


def postpone_tasks(tasks: List[Task], today: date) -> bool:
    """
    Normalize due dates before the collection is read

    - A missing or malformed due date becomes today (completed or not).
    - An uncompleted task due before today moves to tomorrow.
    - Everything else is left alone.

    Running it again on the same day changes nothing.

    Args:
        tasks: Tasks to update in place
        today: Current date

    Returns:
        True if any due date changed
    """
    today_str = format_date(today)
    tomorrow_str = format_date(get_tomorrow(today))
    updated = False

    for task in tasks:
        due = parse_due_date(task.due_date)
        if due is None:
            logger.debug(f"Task '{task.title}' has no valid due date ({task.due_date!r}), using {today_str}")
            task.due_date = today_str
            updated = True
            continue

        if not task.completed and due < today:
            logger.info(f"Postponing '{task.title}' from {task.due_date} to {tomorrow_str}")
            task.due_date = tomorrow_str
            updated = True

    return updated
