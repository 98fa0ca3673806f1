"""The ordered task collection.

Task numbers shown to the user are 1-based positions in this list. Every
operation that takes a task number converts it to a 0-based position by
subtracting one, and tasks after a removed task shift down by one.
"""

import logging
from typing import Iterable, Iterator, List, Optional

from .errors import AlreadyDoneError, InvalidSortKeyError, InvalidTaskNumberError
from .task import Fixed, Task, TaskKind
from .utils.datetime import max_utc, resolve_datetime


logger = logging.getLogger(__name__)

_KIND_ORDER = {kind: position for position, kind in enumerate(TaskKind)}


class TaskList:
    """Owns the tasks and applies operations to them in display order."""

    def __init__(self, tasks: Optional[Iterable[Task]] = None, symbols: bool = True):
        self._tasks: List[Task] = list(tasks) if tasks is not None else []
        self.symbols = symbols

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    @property
    def tasks(self) -> List[Task]:
        """A copy of the tasks in display order, for persistence."""
        return list(self._tasks)

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        return self._tasks[index - 1]

    def _position(self, index: int, message: str = "Invalid task number!") -> int:
        if not 1 <= index <= len(self._tasks):
            raise InvalidTaskNumberError(message)
        return index - 1

    def remove(self, index: int) -> Task:
        """Remove and return the task with the given task number.

        Raises:
            InvalidTaskNumberError: if no task has that number
        """
        task = self._tasks.pop(self._position(index))
        logger.debug("Removed task %d: %s", index, task.description)
        return task

    def remove_all(self) -> None:
        self._tasks.clear()

    def mark_done(self, index: int) -> Task:
        """Mark the task with the given task number as done and return it.

        Marking is deliberately not idempotent: a task that is already done
        is reported as an error.

        Raises:
            InvalidTaskNumberError: if no task has that number
            AlreadyDoneError: if the task is already done
        """
        task = self._tasks[self._position(index)]
        if task.done:
            raise AlreadyDoneError()
        task.mark_as_done()
        return task

    def mark_all_done(self) -> List[Task]:
        """Mark every unfinished task as done, skipping finished ones."""
        marked = [task for task in self._tasks if not task.done]
        for task in marked:
            task.mark_as_done()
        return marked

    def schedule(self, index: int, value: str) -> Task:
        """Set the start date/time of a fixed task.

        Raises:
            InvalidTaskNumberError: if no task has that number or it is not
                a fixed task
        """
        message = "Invalid fixed task number!"
        task = self._tasks[self._position(index, message)]
        if not isinstance(task, Fixed):
            raise InvalidTaskNumberError(message)
        task.start = value
        return task

    def find(self, query: str) -> List[int]:
        """Return the 0-based positions of tasks whose description contains query."""
        return [i for i, task in enumerate(self._tasks) if query in task.description]

    def sort(self, key: str) -> None:
        """Sort the tasks in place by name, type or datetime.

        The sort is stable. Tasks without a date/time, or whose date/time
        cannot be understood, go last when sorting by datetime.

        Raises:
            InvalidSortKeyError: if key is not name, type or datetime
        """
        if key == "name":
            self._tasks.sort(key=lambda t: t.description.lower())
        elif key == "type":
            self._tasks.sort(key=lambda t: _KIND_ORDER[t.kind])
        elif key == "datetime":
            self._tasks.sort(key=lambda t: resolve_datetime(t.when) or max_utc())
        else:
            raise InvalidSortKeyError(key)

    def _line(self, number: int, task: Task) -> str:
        return f"{number}. {task.render(self.symbols)}"

    def get_print_message(self) -> str:
        """Generate the message listing every task.

        >> list
            Here are the tasks in your list:
            1. [T][✘] Mop the floor
            2. [D][✘] assignment (by: Aug 26 2020 23:59)
            3. [E][✘] future date (at: Feb 14 2021 19:00)
        """
        if not self._tasks:
            return "Your list is empty!"

        if len(self._tasks) == 1:
            header = "Here's your one and only task:"
        else:
            header = "Here are the tasks in your list:"

        lines = [header]
        lines.extend(self._line(number, task) for number, task in enumerate(self._tasks, start=1))
        return "\n".join(lines)

    def get_query_result_message(self, indices: List[int]) -> str:
        """Generate the message listing only the tasks at the given positions.

        Results are numbered from 1 in the order given, not by their
        position in the full list.
        """
        if not indices:
            return "Search result is empty!"

        lines = [self._line(number, self._tasks[i]) for number, i in enumerate(indices, start=1)]
        return "\n".join(lines).rstrip()
