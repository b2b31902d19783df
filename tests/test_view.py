import pytest

from tasklist.document import Priority, Task, TaskDocument
from tasklist.editor import EmptyLabelError, TaskForm
from tasklist.view import TaskListView, TaskRow, priority_label


def _view():
    doc = TaskDocument(
        [Task("one", Priority.LOW, False), Task("two", Priority.HIGH, True)]
    )
    return TaskListView(doc)


@pytest.mark.parametrize(
    "priority, label",
    [(Priority.LOW, "Can wait"), (Priority.MEDIUM, "Medium"), (Priority.HIGH, "Urgent")],
)
def test_priority_label(priority, label):
    assert priority_label(priority) == label


def test_rows_reflect_document():
    assert _view().rows() == [
        TaskRow("one", "Can wait", False),
        TaskRow("two", "Urgent", True),
    ]


def test_not_populating_after_construction():
    assert _view().populating is False


def test_set_checked_updates_document():
    view = _view()
    assert view.set_checked(0, True) is True
    assert view.document[0].completed is True
    assert view.document.modified is True
    assert view.rows()[0].checked is True


def test_set_checked_same_state_is_no_change():
    view = _view()
    assert view.set_checked(1, True) is False
    assert view.document.modified is False


@pytest.mark.parametrize("index", [-1, 2])
def test_set_checked_out_of_range_is_ignored(index):
    view = _view()
    assert view.set_checked(index, True) is False
    assert view.document.modified is False


def test_set_checked_ignored_while_populating():
    view = _view()
    view.populating = True
    assert view.set_checked(0, True) is False
    assert view.document[0].completed is False


def test_new_task_appends_and_refreshes():
    view = _view()
    task = view.new_task(TaskForm(" three ", int(Priority.MEDIUM), False))
    assert task == Task("three", Priority.MEDIUM, False)
    assert view.document.modified is True
    assert view.rows()[-1] == TaskRow("three", "Medium", False)
    assert len(view.rows()) == len(view.document)


def test_new_task_with_empty_label_changes_nothing():
    view = _view()
    with pytest.raises(EmptyLabelError):
        view.new_task(TaskForm(""))
    assert len(view.document) == 2
    assert view.document.modified is False


def test_edit_task():
    view = _view()
    form = TaskForm.from_task(view.document[0])
    form.label = "first"
    form.priority_index = int(Priority.HIGH)
    edited = view.edit_task(0, form)
    assert edited == Task("first", Priority.HIGH, False)
    assert view.document[0] == edited
    assert view.rows()[0] == TaskRow("first", "Urgent", False)
    assert view.document.modified is True


@pytest.mark.parametrize("index", [-1, 5])
def test_edit_task_out_of_range(index):
    view = _view()
    assert view.edit_task(index, TaskForm("x")) is None
    assert view.document.modified is False