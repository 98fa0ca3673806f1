"""Task data model for the task tracker.

There are four kinds of task. They share a description and a completion
flag; deadlines, events and fixed tasks also carry a date/time string that
is kept exactly as the user typed it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional

from .errors import EmptyDescriptionError, MalformedTaskDescriptionError


DONE_SYMBOL = "✓"
NOT_DONE_SYMBOL = "✘"


class TaskKind(Enum):
    """Task kinds, keyed by the command keyword that creates them."""
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    FIXED = "fixed"

    @property
    def marker(self) -> str:
        return self.name[0]

    @classmethod
    def from_marker(cls, marker: str) -> "TaskKind":
        for kind in cls:
            if kind.marker == marker:
                return kind
        raise ValueError(f"Unknown task marker: {marker!r}")


class Task:
    """Behaviour shared by every task variant.

    ``description`` can only be assigned once and ``done`` can only move
    from False to True.
    """

    kind: ClassVar[TaskKind]

    description: str
    done: bool

    def __setattr__(self, name, value):
        if name == "description" and "description" in self.__dict__:
            raise AttributeError("Task description cannot be changed")
        if name == "done" and self.__dict__.get("done") and not value:
            raise AttributeError("A completed task cannot be reopened")
        super().__setattr__(name, value)

    def mark_as_done(self) -> None:
        self.done = True

    @property
    def when(self) -> Optional[str]:
        """The raw date/time text of this task, if it has one."""
        return None

    def suffix(self) -> str:
        return ""

    def render(self, symbols: bool = True) -> str:
        """Render the task the way it appears in list output.

        >>> Deadline("return book", "Aug 26 2020").render()
        '[D][✘] return book (by: Aug 26 2020)'
        """
        if symbols:
            mark = DONE_SYMBOL if self.done else NOT_DONE_SYMBOL
        else:
            mark = "X" if self.done else " "
        return f"[{self.kind.marker}][{mark}] {self.description}{self.suffix()}"

    def __str__(self) -> str:
        return self.render()


@dataclass
class Todo(Task):
    """A plain task with a description only."""
    kind: ClassVar[TaskKind] = TaskKind.TODO

    description: str
    done: bool = False


@dataclass
class Deadline(Task):
    """A task that has to be completed by a date and time."""
    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    description: str
    due_by: str
    done: bool = False

    @property
    def when(self) -> Optional[str]:
        return self.due_by

    def suffix(self) -> str:
        return f" (by: {self.due_by})"


@dataclass
class Event(Task):
    """A task that requires attendance at a date and time."""
    kind: ClassVar[TaskKind] = TaskKind.EVENT

    description: str
    at: str
    done: bool = False

    @property
    def when(self) -> Optional[str]:
        return self.at

    def suffix(self) -> str:
        return f" (at: {self.at})"


@dataclass
class Fixed(Task):
    """A task whose start date and time is scheduled after creation."""
    kind: ClassVar[TaskKind] = TaskKind.FIXED

    description: str
    start: Optional[str] = None
    done: bool = False

    @property
    def when(self) -> Optional[str]:
        return self.start

    def suffix(self) -> str:
        return f" (start: {self.start or 'not set'})"


def _split_description(kind: TaskKind, description: str, separator: str):
    parts = description.split(separator)
    if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
        raise MalformedTaskDescriptionError(kind.value)
    return parts[0].strip(), parts[1].strip()


def create_task(kind: str, raw_description: str) -> Task:
    """Build a task from a command keyword and the rest of the input line.

    Examples:

        "sleep for 20 hrs"               -> Todo
        "assignment /by Aug 26 2020"     -> Deadline
        "lecture /at today 10:00"        -> Event

    Args:
        kind: One of "todo", "deadline", "event", "fixed"
        raw_description: Everything after the keyword

    Returns:
        The new, not yet completed task

    Raises:
        EmptyDescriptionError: if the description is blank
        MalformedTaskDescriptionError: if a deadline or event is missing its
            " /by " or " /at " separator, or the kind is unknown
    """
    description = raw_description.strip()
    if not description:
        raise EmptyDescriptionError()

    try:
        task_kind = TaskKind(kind)
    except ValueError:
        raise MalformedTaskDescriptionError(kind) from None

    if task_kind is TaskKind.TODO:
        return Todo(description)
    if task_kind is TaskKind.DEADLINE:
        desc, by = _split_description(task_kind, description, " /by ")
        return Deadline(desc, by)
    if task_kind is TaskKind.EVENT:
        desc, at = _split_description(task_kind, description, " /at ")
        return Event(desc, at)
    return Fixed(description)
