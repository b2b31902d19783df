import pytest

from tasklist.document import Priority, Task
from tasklist.editor import EmptyLabelError, TaskForm, priority_labels


def test_priority_labels():
    assert priority_labels() == ("Can wait", "Medium", "Urgent")


def test_priority_labels_line_up_with_priorities():
    assert len(priority_labels()) == len(Priority)


def test_default_form_is_medium_and_open():
    form = TaskForm()
    assert form.priority_index == int(Priority.MEDIUM)
    assert form.completed is False
    assert form.label == ""


def test_submit_trims_label():
    form = TaskForm("  walk the dog \t")
    assert form.submit().label == "walk the dog"
    assert form.label == "walk the dog"


@pytest.mark.parametrize("label", ["", "   ", "\t\n"])
def test_empty_label_is_rejected(label):
    with pytest.raises(EmptyLabelError, match="Please enter a task name."):
        TaskForm(label).submit()


def test_to_task():
    task = TaskForm(" pay rent ", int(Priority.HIGH), True).to_task()
    assert task == Task("pay rent", Priority.HIGH, True)


def test_to_task_rejects_empty_label():
    with pytest.raises(EmptyLabelError):
        TaskForm("").to_task()


@pytest.mark.parametrize("index", [-1, 3])
def test_to_task_rejects_bad_priority(index):
    with pytest.raises(ValueError):
        TaskForm("x", index).to_task()


def test_from_task_round_trip():
    original = Task("call home", Priority.LOW, True)
    assert TaskForm.from_task(original).to_task() == original