"""Task documents and the binary archive format they are stored in."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Union

PathLike = Union[str, Path]


class ArchiveError(ValueError):
    """Raised when archive data is truncated or malformed."""


class Priority(enum.IntEnum):
    """How urgent a task is; the values are those stored in archives."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2


@dataclass
class Task:
    """A single entry on the list."""

    label: str = ""
    priority: Priority = Priority.MEDIUM
    completed: bool = False


_UNICODE_MARKER = 0xFFFE


def _write_string(out: bytearray, text: str) -> None:
    encoded = text.encode("utf-16-le")
    length = len(encoded) // 2
    out += b"\xff" + struct.pack("<H", _UNICODE_MARKER)
    if length < 0xFF:
        out += struct.pack("<B", length)
    elif length < 0xFFFE:
        out += b"\xff" + struct.pack("<H", length)
    else:
        out += b"\xff" + struct.pack("<HI", 0xFFFF, length)
    out += encoded


class _Reader:
    """Sequential reader over archive bytes."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise ArchiveError("unexpected end of archive")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def unpack(self, fmt: str) -> int:
        return struct.unpack(fmt, self.take(struct.calcsize(fmt)))[0]

    def _length(self) -> tuple[int, int]:
        char_size = 1
        short = self.unpack("<B")
        if short < 0xFF:
            return short, char_size
        word = self.unpack("<H")
        if word == _UNICODE_MARKER:
            char_size = 2
            short = self.unpack("<B")
            if short < 0xFF:
                return short, char_size
            word = self.unpack("<H")
        if word < 0xFFFF:
            return word, char_size
        dword = self.unpack("<I")
        if dword < 0xFFFFFFFF:
            return dword, char_size
        return self.unpack("<Q"), char_size

    def string(self) -> str:
        length, char_size = self._length()
        raw = self.take(length * char_size)
        if char_size == 2:
            try:
                return raw.decode("utf-16-le")
            except UnicodeDecodeError as exc:
                raise ArchiveError(f"invalid string in archive: {exc}") from None
        return raw.decode("latin-1")


@dataclass
class TaskDocument:
    """An ordered list of tasks with a flag telling whether it has unsaved changes."""

    tasks: list[Task] = field(default_factory=list)
    modified: bool = False

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __getitem__(self, index: int) -> Task:
        return self.tasks[index]

    def new(self) -> None:
        """Empty the document, as for a fresh file."""
        self.tasks.clear()
        self.modified = False

    def add(self, task: Task) -> None:
        """Append a task and mark the document as modified."""
        self.tasks.append(task)
        self.modified = True

    def to_bytes(self) -> bytes:
        """Serialise the tasks to the archive format."""
        out = bytearray(struct.pack("<i", len(self.tasks)))
        for task in self.tasks:
            _write_string(out, task.label)
            out += struct.pack("<i", int(task.priority))
            out += struct.pack("<B", 1 if task.completed else 0)
        return bytes(out)

    @classmethod
    def from_bytes(cls, data: bytes) -> "TaskDocument":
        """Read a document from archive bytes."""
        reader = _Reader(data)
        count = reader.unpack("<i")
        tasks = []
        for _ in range(count):
            label = reader.string()
            raw_priority = reader.unpack("<i")
            completed = reader.unpack("<B") != 0
            try:
                priority = Priority(raw_priority)
            except ValueError:
                raise ArchiveError(f"unknown priority {raw_priority}") from None
            tasks.append(Task(label, priority, completed))
        return cls(tasks)

    def save(self, path: PathLike) -> None:
        """Write the document to a file and clear the modified flag."""
        Path(path).write_bytes(self.to_bytes())
        self.modified = False

    @classmethod
    def load(cls, path: PathLike) -> "TaskDocument":
        """Read a document from a file."""
        return cls.from_bytes(Path(path).read_bytes())