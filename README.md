# tasklist

A small to-do list keeper. Each task has a label, a priority
(*Can wait*, *Medium* or *Urgent*) and a completed flag. A list of tasks is
kept in a document that is saved to and loaded from a compact binary file.

## Installing

```
pip install .
```

## Using the command

Every run names a task file and then one command:

```
tasklist FILE COMMAND [ARGUMENTS]
```

If the file does not exist, the list starts empty. The file is written back
only when the command changed something.

| Command | What it does |
| --- | --- |
| `list` | Prints each task as `index  [x]  priority  label` (`[x]` for finished, `[ ]` for open). |
| `add LABEL [-p PRIORITY] [--done]` | Adds a task. The priority defaults to *Medium*. |
| `edit INDEX [--label LABEL] [-p PRIORITY] [--done \| --not-done]` | Changes only the fields given. |
| `check INDEX` | Marks a task finished. |
| `uncheck INDEX` | Marks a task open. |

A priority is given by name (`"can wait"`, `medium`, `urgent`, in any case)
or by number (`0`, `1`, `2`). Tasks are numbered from 0 in the order they were
added.

```
tasklist tasks.dat add "Water the plants" -p urgent
tasklist tasks.dat add "Read the manual"
tasklist tasks.dat check 0
tasklist tasks.dat list
```

A label must not be blank; surrounding whitespace is trimmed. On an error —
a blank label, an index with no task, a file that cannot be read or is not a
task file — the command prints `tasklist: <message>` to standard error and
exits with status 1.

## Using the library

```python
from tasklist.document import Priority, Task, TaskDocument
from tasklist.editor import TaskForm
from tasklist.view import TaskListView

doc = TaskDocument()
doc.add(Task("Water the plants", Priority.HIGH))
doc.save("tasks.dat")

doc = TaskDocument.load("tasks.dat")
view = TaskListView(doc)
for row in view.rows():
    print(row.label, row.priority, row.checked)

form = TaskForm.from_task(doc.tasks[0])
form.completed = True
view.edit_task(0, form)
```

- `tasklist.document` holds `Priority` (`LOW`, `MEDIUM`, `HIGH`), `Task` and
  `TaskDocument`. A document has a `modified` flag that `add()` sets and
  `save()` clears; `to_bytes()` and `from_bytes()` convert to and from the
  file format. `from_bytes()` and `load()` raise `ArchiveError` for data they
  cannot read.
- `tasklist.editor` holds `TaskForm`, which keeps the priority as an index
  into `priority_labels()`. `submit()` trims the label and raises
  `EmptyLabelError` when it is blank; `to_task()` submits and builds a `Task`.
- `tasklist.view` holds `TaskListView`, which shows a document as `TaskRow`
  values and applies changes to it: `new_task()`, `edit_task()` (returns
  `None` for an index with no task) and `set_checked()` (returns whether the
  document changed). `priority_label()` gives a priority's display name.

## What it does not do

There is no graphical or interactive screen: each run of `tasklist` carries
out one command and exits. Tasks cannot be deleted or reordered, and there is
no printing.

## Running the tests

```
pip install .[test]
pytest
```