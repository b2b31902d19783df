"""A list view over a task document."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from tasklist.document import Priority, Task, TaskDocument
from tasklist.editor import TaskForm, priority_labels

COLUMNS = (("Task", 200), ("Priority", 100))


def priority_label(priority: int) -> str:
    """Display name of a priority."""
    return priority_labels()[Priority(priority)]


@dataclass(frozen=True)
class TaskRow:
    """One displayed row: label, priority name and check state."""

    label: str
    priority: str
    checked: bool


class TaskListView:
    """Keeps displayed rows in step with a document and applies user edits to it."""

    def __init__(self, document: TaskDocument) -> None:
        self.document = document
        self.populating = True
        self._rows: list[TaskRow] = []
        self.refresh()

    def refresh(self) -> None:
        """Rebuild the rows from the document."""
        self.populating = True
        try:
            self._rows = [
                TaskRow(task.label, priority_label(task.priority), task.completed)
                for task in self.document
            ]
        finally:
            self.populating = False

    def rows(self) -> list[TaskRow]:
        """The rows currently shown."""
        return list(self._rows)

    def set_checked(self, index: int, checked: bool) -> bool:
        """Change a row's check box; returns whether the document changed."""
        if self.populating:
            return False
        if not 0 <= index < min(len(self._rows), len(self.document)):
            return False
        row = self._rows[index]
        if row.checked == checked:
            return False
        self._rows[index] = replace(row, checked=checked)
        self.document.tasks[index].completed = checked
        self.document.modified = True
        return True

    def new_task(self, form: TaskForm) -> Task:
        """Add the task described by a form."""
        task = form.to_task()
        self.document.add(task)
        self.refresh()
        return task

    def edit_task(self, index: int, form: TaskForm) -> Optional[Task]:
        """Replace a task's values with those of a form; None if there is no such task."""
        if not 0 <= index < len(self.document):
            return None
        updated = form.to_task()
        task = self.document.tasks[index]
        task.label = updated.label
        task.priority = updated.priority
        task.completed = updated.completed
        self.document.modified = True
        self.refresh()
        return task