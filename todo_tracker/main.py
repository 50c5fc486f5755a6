"""
Command-line entry point
"""

import argparse
import sys
from typing import List, Optional
from todo_tracker.config.settings import settings
from todo_tracker.models.command import ActionType, ParsedCommand
from todo_tracker.services.task_manager import TaskManager
from todo_tracker.utils.error_handler import (
    InvalidInputError,
    TodoError,
    format_error_message,
)
from todo_tracker.utils.logger import logger


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the `todo` command"""
    parser = argparse.ArgumentParser(prog="todo", description="Personal todo list")
    parser.add_argument(
        "--file",
        default=settings.TODO_FILE,
        help=f"Task file (default: {settings.TODO_FILE}, env TODO_FILE)",
    )
    parser.add_argument("--no-color", action="store_true", help="Plain `list` output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    add_parser = subparsers.add_parser("add", help="Add a task due today")
    add_parser.add_argument("text", nargs="+", help="Task title")

    subparsers.add_parser("list", help="List tasks sorted by due date and title")
    subparsers.add_parser("pending", help="Show titles of uncompleted tasks")

    complete_parser = subparsers.add_parser("complete", help="Complete a task by exact title")
    complete_parser.add_argument("text", nargs="+", help="Task title")

    delete_parser = subparsers.add_parser("delete", help="Delete a task by number from `list`")
    delete_parser.add_argument("number", help="Task number")

    toggle_parser = subparsers.add_parser("toggle", help="Toggle completion by number from `list`")
    toggle_parser.add_argument("number", help="Task number")

    edit_parser = subparsers.add_parser("edit", help="Rename a task: edit <number>:<new title>")
    edit_parser.add_argument("spec", nargs="+", help="<number>:<new title>")

    return parser


def _parse_position(raw: str) -> int:
    try:
        position = int(raw.strip().rstrip("."))
    except ValueError:
        raise InvalidInputError(f"invalid task number: {raw}")
    if position < 1:
        raise InvalidInputError(f"task numbers start at 1, got {position}")
    return position


def parse_command(args: argparse.Namespace) -> ParsedCommand:
    """
    Turn parsed arguments into a command

    Args:
        args: Namespace from build_parser()

    Returns:
        Parsed command

    Raises:
        InvalidInputError: If a task number or edit argument is malformed
    """
    action = ActionType(args.command)

    if action in (ActionType.ADD, ActionType.COMPLETE):
        return ParsedCommand(action=action, title=" ".join(args.text))

    if action in (ActionType.DELETE, ActionType.TOGGLE):
        return ParsedCommand(action=action, position=_parse_position(args.number))

    if action == ActionType.EDIT:
        spec = " ".join(args.spec)
        number, sep, title = spec.partition(":")
        if not sep:
            raise InvalidInputError("invalid format for edit, use <number>:<new title>")
        return ParsedCommand(action=action, position=_parse_position(number), title=title)

    return ParsedCommand(action=action)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run one command

    Returns:
        Process exit status (0 on success, 1 on failure)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        command = parse_command(args)
        manager = TaskManager(args.file, color=not args.no_color)
        message = manager.execute(command)
    except TodoError as e:
        print(format_error_message(e), file=sys.stderr)
        return 1

    logger.debug(f"Command '{args.command}' finished")
    print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
