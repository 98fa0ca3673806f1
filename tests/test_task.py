"""Tests for the task model and task factory."""

import pytest

from task_tracker.errors import EmptyDescriptionError, MalformedTaskDescriptionError
from task_tracker.task import Deadline, Event, Fixed, TaskKind, Todo, create_task


class TestTaskRendering:
    """Test how tasks appear in list output."""

    def test_todo_rendering(self):
        assert str(Todo("Mop the floor")) == "[T][✘] Mop the floor"

    def test_deadline_rendering(self):
        task = Deadline("assignment", "Aug 26 2020 23:59")
        assert str(task) == "[D][✘] assignment (by: Aug 26 2020 23:59)"

    def test_event_rendering(self):
        task = Event("future date", "Feb 14 2021 19:00", done=True)
        assert str(task) == "[E][✓] future date (at: Feb 14 2021 19:00)"

    def test_fixed_rendering(self):
        task = Fixed("read book")
        assert str(task) == "[F][✘] read book (start: not set)"
        task.start = "today 23:00"
        assert str(task) == "[F][✘] read book (start: today 23:00)"

    def test_plain_markers(self):
        """Without symbols, done is X and not done is a space."""
        assert Todo("a").render(symbols=False) == "[T][ ] a"
        assert Todo("a", done=True).render(symbols=False) == "[T][X] a"


class TestTaskInvariants:
    """Test the mutation rules shared by every task."""

    def test_mark_as_done(self):
        task = Todo("Test task")
        assert task.done is False

        task.mark_as_done()
        assert task.done is True

    def test_description_is_immutable(self):
        task = Deadline("assignment", "Aug 26")
        with pytest.raises(AttributeError):
            task.description = "something else"
        assert task.description == "assignment"

    def test_done_cannot_be_reversed(self):
        task = Todo("Test task", done=True)
        with pytest.raises(AttributeError):
            task.done = False
        assert task.done is True

    def test_kind_markers(self):
        assert [kind.marker for kind in TaskKind] == ["T", "D", "E", "F"]
        assert TaskKind.from_marker("E") is TaskKind.EVENT
        with pytest.raises(ValueError):
            TaskKind.from_marker("Z")


class TestCreateTask:
    """Test the task factory."""

    def test_create_todo(self):
        task = create_task("todo", "sleep for 20 hrs")
        assert isinstance(task, Todo)
        assert task.description == "sleep for 20 hrs"
        assert task.done is False

    def test_create_todo_trims_description(self):
        assert create_task("todo", "  read book  ").description == "read book"

    def test_create_deadline(self):
        task = create_task("deadline", "assignment /by Aug 26 2020")
        assert isinstance(task, Deadline)
        assert task.description == "assignment"
        assert task.due_by == "Aug 26 2020"

    def test_create_event(self):
        task = create_task("event", "lecture /at today 10:00")
        assert isinstance(task, Event)
        assert task.description == "lecture"
        assert task.at == "today 10:00"

    def test_create_fixed(self):
        task = create_task("fixed", "read book")
        assert isinstance(task, Fixed)
        assert task.start is None

    @pytest.mark.parametrize("kind", ["todo", "deadline", "event", "fixed"])
    def test_empty_description(self, kind):
        with pytest.raises(EmptyDescriptionError) as exc:
            create_task(kind, "   ")
        assert exc.value.message == "Description cannot be empty!"

    def test_deadline_without_separator(self):
        with pytest.raises(MalformedTaskDescriptionError) as exc:
            create_task("deadline", "assignment by Aug 26 2020")
        assert exc.value.message == "Invalid deadline description!"

    def test_event_with_wrong_separator(self):
        with pytest.raises(MalformedTaskDescriptionError):
            create_task("event", "lecture /by today")

    def test_deadline_with_two_separators(self):
        with pytest.raises(MalformedTaskDescriptionError):
            create_task("deadline", "a /by b /by c")

    def test_unknown_kind(self):
        with pytest.raises(MalformedTaskDescriptionError):
            create_task("chore", "wash dishes")

    def test_deterministic(self):
        """Same input twice renders identically."""
        first = create_task("event", "lecture /at today 10:00")
        second = create_task("event", "lecture /at today 10:00")
        assert str(first) == str(second)
        assert first == second
