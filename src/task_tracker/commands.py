"""Commands produced by the parser.

Each command is a small dataclass holding the data it needs. They all
share one contract: ``execute(tasks)`` applies the command to a
:class:`TaskList` and returns the message to show the user. Commands that
change the list set ``mutates`` so the session knows to save afterwards.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar, Optional

from .task import create_task
from .task_list import TaskList


logger = logging.getLogger(__name__)

HELP_TEXT = """Here's what I can do:
  todo <description>                      Add a to-do
  deadline <description> /by <date time>  Add a task with a deadline
  event <description> /at <date time>     Add an event
  fixed <description>                     Add a task to schedule later
  start <number> <date> <time>            Schedule a fixed task
  list                                    Show all tasks
  done <number> | done all                Mark tasks as done
  remove <number> | remove all            Remove tasks (also: delete)
  find <keyword>                          Show tasks containing a keyword
  sort name | type | datetime             Sort the list
  help                                    Show this message
  bye                                     Save and quit (also: exit, quit)"""


def _count_message(tasks: TaskList) -> str:
    noun = "task" if len(tasks) == 1 else "tasks"
    return f"Now you have {len(tasks)} {noun} in the list."


class Command:
    """Base class for every command."""

    is_exit: ClassVar[bool] = False
    mutates: ClassVar[bool] = False

    def execute(self, tasks: TaskList) -> str:
        raise NotImplementedError


@dataclass
class Exit(Command):
    is_exit: ClassVar[bool] = True

    def execute(self, tasks: TaskList) -> str:
        return "Bye. Hope to see you again soon!"


@dataclass
class AddTask(Command):
    """Create a task of the given kind and append it to the list."""
    mutates: ClassVar[bool] = True

    kind: str
    raw_description: str

    def execute(self, tasks: TaskList) -> str:
        task = create_task(self.kind, self.raw_description)
        tasks.add(task)
        logger.debug("Added %s task: %s", task.kind.value, task.description)
        return f"Got it. I've added this task:\n  {task.render(tasks.symbols)}\n{_count_message(tasks)}"


@dataclass
class MarkDone(Command):
    """Mark one task as done, or every task when ``index`` is None."""
    mutates: ClassVar[bool] = True

    index: Optional[int] = None

    def execute(self, tasks: TaskList) -> str:
        if self.index is None:
            marked = tasks.mark_all_done()
            if not marked:
                return "All your tasks are already done!"
            return "Nice! I've marked all your tasks as done."
        task = tasks.mark_done(self.index)
        return f"Nice! I've marked this task as done:\n  {task.render(tasks.symbols)}"


@dataclass
class Remove(Command):
    """Remove one task, or every task when ``index`` is None."""
    mutates: ClassVar[bool] = True

    index: Optional[int] = None

    def execute(self, tasks: TaskList) -> str:
        if self.index is None:
            tasks.remove_all()
            return "Noted. I've removed all tasks from your list."
        task = tasks.remove(self.index)
        return f"Noted. I've removed this task:\n  {task.render(tasks.symbols)}\n{_count_message(tasks)}"


@dataclass
class ListAll(Command):
    def execute(self, tasks: TaskList) -> str:
        return tasks.get_print_message()


@dataclass
class Find(Command):
    """Show the tasks whose description contains the query.

    Matching is plain substring containment, so "end" finds both
    "friend" and "enderman".
    """

    query: str

    def execute(self, tasks: TaskList) -> str:
        indices = tasks.find(self.query)
        logger.debug("Query %r matched %d task(s)", self.query, len(indices))
        return tasks.get_query_result_message(indices)


@dataclass
class Sort(Command):
    mutates: ClassVar[bool] = True

    key: str

    def execute(self, tasks: TaskList) -> str:
        tasks.sort(self.key)
        return f"Sorted your list by {self.key}!\n{tasks.get_print_message()}"


@dataclass
class SetSchedule(Command):
    """Set the start date/time of a fixed task."""
    mutates: ClassVar[bool] = True

    index: int
    value: str

    def execute(self, tasks: TaskList) -> str:
        task = tasks.schedule(self.index, self.value)
        return f"Got it. I've scheduled this task:\n  {task.render(tasks.symbols)}"


@dataclass
class Invalid(Command):
    """Placeholder for input that could not be turned into a command."""

    message: Optional[str] = None

    def execute(self, tasks: TaskList) -> str:
        if self.message:
            return self.message
        return "Sorry, I don't know what that means. Type 'help' for the list of commands."


@dataclass
class Help(Command):
    def execute(self, tasks: TaskList) -> str:
        return HELP_TEXT
