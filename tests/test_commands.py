"""Tests for command execution."""

import pytest

from task_tracker.commands import (
    HELP_TEXT,
    AddTask,
    Exit,
    Find,
    Help,
    Invalid,
    ListAll,
    MarkDone,
    Remove,
    SetSchedule,
    Sort,
)
from task_tracker.errors import AlreadyDoneError, InvalidTaskNumberError
from task_tracker.parser import parse
from task_tracker.task import Fixed, Todo
from task_tracker.task_list import TaskList


class TestAddTask:
    """Test adding tasks through commands."""

    def test_add_todo(self):
        tasks = TaskList()
        message = AddTask("todo", "read book").execute(tasks)

        assert len(tasks) == 1
        assert message == (
            "Got it. I've added this task:\n"
            "  [T][✘] read book\n"
            "Now you have 1 task in the list."
        )

    def test_add_deadline_counts_tasks(self, sample_tasks):
        message = AddTask("deadline", "return book /by Sunday").execute(sample_tasks)
        assert "[D][✘] return book (by: Sunday)" in message
        assert message.endswith("Now you have 4 tasks in the list.")

    def test_mutating_flags(self):
        assert AddTask.mutates and MarkDone.mutates and Remove.mutates
        assert Sort.mutates and SetSchedule.mutates
        assert not ListAll.mutates and not Find.mutates and not Help.mutates
        assert not Invalid.mutates and not Exit.mutates


class TestMarkDoneCommand:
    """Test marking one or all tasks done."""

    def test_mark_one(self, sample_tasks):
        message = MarkDone(1).execute(sample_tasks)
        assert message == "Nice! I've marked this task as done:\n  [T][✓] Mop the floor"

    def test_mark_one_already_done(self, sample_tasks):
        with pytest.raises(AlreadyDoneError):
            MarkDone(3).execute(sample_tasks)

    def test_done_all_skips_finished_task(self, sample_tasks):
        """Two undone and one done task: both undone are marked, no error."""
        message = parse("done all").execute(sample_tasks)

        assert all(task.done for task in sample_tasks)
        assert message == "Nice! I've marked all your tasks as done."

    def test_done_all_when_everything_done(self):
        tasks = TaskList([Todo("a", done=True)])
        assert MarkDone().execute(tasks) == "All your tasks are already done!"


class TestRemoveCommand:
    """Test removing one or all tasks."""

    def test_remove_one(self, sample_tasks):
        message = Remove(2).execute(sample_tasks)
        assert message.startswith("Noted. I've removed this task:\n  [D][✘] assignment")
        assert message.endswith("Now you have 2 tasks in the list.")

    def test_remove_invalid_number_leaves_list(self, sample_tasks):
        with pytest.raises(InvalidTaskNumberError):
            Remove(0).execute(sample_tasks)
        assert len(sample_tasks) == 3

    def test_remove_all(self, sample_tasks):
        message = Remove().execute(sample_tasks)
        assert len(sample_tasks) == 0
        assert message == "Noted. I've removed all tasks from your list."


class TestQueryCommands:
    """Test list, find, sort and schedule."""

    def test_list(self, sample_tasks):
        assert ListAll().execute(sample_tasks) == sample_tasks.get_print_message()

    def test_find(self):
        tasks = TaskList([Todo("friend"), Todo("enderman"), Todo("book")])
        assert Find("end").execute(tasks) == "1. [T][✘] friend\n2. [T][✘] enderman"

    def test_find_renumbers_results(self):
        tasks = TaskList([Todo("book"), Todo("friend")])
        assert Find("end").execute(tasks) == "1. [T][✘] friend"

    def test_find_nothing(self, sample_tasks):
        assert Find("zebra").execute(sample_tasks) == "Search result is empty!"

    def test_sort(self):
        tasks = TaskList([Todo("b"), Todo("a")])
        message = Sort("name").execute(tasks)
        assert message == (
            "Sorted your list by name!\n"
            "Here are the tasks in your list:\n"
            "1. [T][✘] a\n"
            "2. [T][✘] b"
        )

    def test_set_schedule(self):
        tasks = TaskList([Fixed("read book")])
        message = SetSchedule(1, "today 23:00").execute(tasks)
        assert message == "Got it. I've scheduled this task:\n  [F][✘] read book (start: today 23:00)"


class TestMiscCommands:
    """Test help, invalid input and exit."""

    def test_help(self):
        assert Help().execute(TaskList()) == HELP_TEXT

    def test_invalid_with_hint(self):
        assert Invalid("Try again").execute(TaskList()) == "Try again"

    def test_invalid_without_hint(self):
        assert "don't know what that means" in Invalid().execute(TaskList())

    def test_exit(self):
        assert Exit().execute(TaskList()) == "Bye. Hope to see you again soon!"
