"""Command-line entry point for keeping a task file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from tasklist.document import ArchiveError, TaskDocument
from tasklist.editor import TaskForm, priority_labels
from tasklist.view import TaskListView


class _CommandError(Exception):
    """A command could not be carried out."""


def _priority(text: str) -> int:
    for index, label in enumerate(priority_labels()):
        if text.casefold() in (label.casefold(), str(index)):
            return index
    choices = ", ".join(priority_labels())
    raise argparse.ArgumentTypeError(f"unknown priority {text!r} (choose from {choices})")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tasklist", description="Keep a list of tasks in a file.")
    parser.add_argument("file", type=Path, help="task file to open")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="show the tasks")

    add = commands.add_parser("add", help="add a task")
    add.add_argument("label")
    add.add_argument("-p", "--priority", type=_priority, default=1)
    add.add_argument("--done", action="store_true", help="mark the task as finished")

    edit = commands.add_parser("edit", help="change a task")
    edit.add_argument("index", type=int)
    edit.add_argument("--label")
    edit.add_argument("-p", "--priority", type=_priority)
    state = edit.add_mutually_exclusive_group()
    state.add_argument("--done", dest="completed", action="store_const", const=True)
    state.add_argument("--not-done", dest="completed", action="store_const", const=False)

    for name, text in (("check", "mark a task finished"), ("uncheck", "mark a task open")):
        sub = commands.add_parser(name, help=text)
        sub.add_argument("index", type=int)
    return parser


def _open(path: Path) -> TaskDocument:
    if not path.exists():
        return TaskDocument()
    return TaskDocument.load(path)


def _require_index(view: TaskListView, index: int) -> None:
    if not 0 <= index < len(view.document):
        raise _CommandError(f"no task at index {index}")


def _list(view: TaskListView, args: argparse.Namespace) -> None:
    for index, row in enumerate(view.rows()):
        mark = "x" if row.checked else " "
        print(f"{index}\t[{mark}]\t{row.priority}\t{row.label}")


def _add(view: TaskListView, args: argparse.Namespace) -> None:
    view.new_task(TaskForm(args.label, args.priority, args.done))


def _edit(view: TaskListView, args: argparse.Namespace) -> None:
    _require_index(view, args.index)
    form = TaskForm.from_task(view.document[args.index])
    if args.label is not None:
        form.label = args.label
    if args.priority is not None:
        form.priority_index = args.priority
    if args.completed is not None:
        form.completed = args.completed
    view.edit_task(args.index, form)


def _check(view: TaskListView, args: argparse.Namespace) -> None:
    _require_index(view, args.index)
    view.set_checked(args.index, args.command == "check")


_COMMANDS: dict[str, Callable[[TaskListView, argparse.Namespace], None]] = {
    "list": _list,
    "add": _add,
    "edit": _edit,
    "check": _check,
    "uncheck": _check,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one command against a task file; returns the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        document = _open(args.file)
        view = TaskListView(document)
        _COMMANDS[args.command](view, args)
        if document.modified:
            document.save(args.file)
    except (OSError, ArchiveError, ValueError, _CommandError) as exc:
        print(f"tasklist: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())