"""The form used to create or edit a task."""

from __future__ import annotations

from dataclasses import dataclass

from tasklist.document import Priority, Task

_PRIORITY_LABELS = ("Can wait", "Medium", "Urgent")


def priority_labels() -> tuple[str, ...]:
    """Names of the priorities, indexed by priority value."""
    return _PRIORITY_LABELS


class EmptyLabelError(ValueError):
    """Raised when a form is submitted without a task name."""

    def __init__(self) -> None:
        super().__init__("Please enter a task name.")


@dataclass
class TaskForm:
    """Editable fields of a task; the priority is held as its list index."""

    label: str = ""
    priority_index: int = int(Priority.MEDIUM)
    completed: bool = False

    @classmethod
    def from_task(cls, task: Task) -> "TaskForm":
        """A form filled in with an existing task's values."""
        return cls(task.label, int(task.priority), task.completed)

    def submit(self) -> "TaskForm":
        """Trim the label and check that it is not empty."""
        self.label = self.label.strip()
        if not self.label:
            raise EmptyLabelError()
        return self

    def to_task(self) -> Task:
        """Submit the form and build the task it describes."""
        self.submit()
        try:
            priority = Priority(self.priority_index)
        except ValueError:
            raise ValueError(f"no priority at index {self.priority_index}") from None
        return Task(self.label, priority, bool(self.completed))