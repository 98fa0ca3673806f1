"""Task Tracker - a command-line task tracker driven by one-line commands."""

__version__ = "0.2.0"
__author__ = "Task Tracker Team"

from .task import Task, TaskKind, Todo, Deadline, Event, Fixed, create_task
from .task_list import TaskList
from .parser import parse

__all__ = [
    "Task",
    "TaskKind",
    "Todo",
    "Deadline",
    "Event",
    "Fixed",
    "create_task",
    "TaskList",
    "parse",
    "__version__",
]
