"""Storage layer for the task tracker using a markdown file with YAML frontmatter.

The task file looks like::

    ---
    count: 2
    saved: '2024-05-01T09:30:00+00:00'
    title: Tasks
    ---
    # Tasks

    - [ ] T | read book
    - [x] D | return book | Aug 26 2020 23:59

One line per task, in display order.
"""

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import List, Optional

import frontmatter
import yaml

from .config import ConfigModel
from .errors import StorageError
from .task import Deadline, Event, Fixed, Task, TaskKind, Todo
from .utils.datetime import now_utc, to_iso_string


logger = logging.getLogger(__name__)

TASK_LINE_RE = re.compile(r"^- \[( |x)\] ([TDEF]) \| (.*)$")
FIELD_SEPARATOR = " | "


def escape_field(text: str) -> str:
    """Escape backslashes and pipes so a field can sit between separators."""
    return text.replace("\\", "\\\\").replace("|", "\\|")


def split_fields(text: str) -> List[str]:
    """Split on unescaped pipes and unescape each field.

    "a \\| b | c" -> ["a | b", "c"]
    """
    result = []
    current = []
    chars = iter(text)
    for char in chars:
        if char == "\\":
            current.append(next(chars, "\\"))
        elif char == "|":
            result.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    result.append("".join(current).strip())
    return result


class TaskMarkdownFormat:
    """Handles conversion between Task objects and markdown lines."""

    @staticmethod
    def to_markdown(task: Task) -> str:
        """Convert a task to a single markdown checklist line."""
        checkbox = "- [x]" if task.done else "- [ ]"
        parts = [escape_field(task.description)]
        if task.when is not None:
            parts.append(escape_field(task.when))
        return f"{checkbox} {task.kind.marker} | {FIELD_SEPARATOR.join(parts)}"

    @staticmethod
    def from_markdown(line: str) -> Optional[Task]:
        """Parse a markdown line back to a task; non-task lines give None.

        Raises:
            ValueError: if the line looks like a task but its fields do not
                match its kind
        """
        line = line.strip()
        match = TASK_LINE_RE.match(line)
        if not match:
            return None

        done = match.group(1) == "x"
        kind = TaskKind.from_marker(match.group(2))
        fields = split_fields(match.group(3))
        description = fields[0]
        if not description:
            raise ValueError(f"Task line has no description: {line!r}")

        if kind is TaskKind.TODO and len(fields) == 1:
            return Todo(description, done=done)
        if kind is TaskKind.DEADLINE and len(fields) == 2:
            return Deadline(description, fields[1], done=done)
        if kind is TaskKind.EVENT and len(fields) == 2:
            return Event(description, fields[1], done=done)
        if kind is TaskKind.FIXED and len(fields) <= 2:
            start = fields[1] if len(fields) == 2 else None
            return Fixed(description, start, done=done)

        raise ValueError(f"Malformed {kind.value} line: {line!r}")


class TaskFileFormat:
    """Handles conversion between the task list and the whole task file."""

    @staticmethod
    def to_markdown(tasks: List[Task]) -> str:
        """Convert tasks to markdown content with YAML frontmatter."""
        content_lines = ["# Tasks", ""]
        content_lines.extend(TaskMarkdownFormat.to_markdown(task) for task in tasks)

        post = frontmatter.Post(
            "\n".join(content_lines),
            title="Tasks",
            count=len(tasks),
            saved=to_iso_string(now_utc()),
        )
        return frontmatter.dumps(post)

    @staticmethod
    def from_markdown(content: str) -> List[Task]:
        """Parse a task file back to tasks, in file order."""
        post = frontmatter.loads(content)

        tasks = []
        for line in post.content.split("\n"):
            task = TaskMarkdownFormat.from_markdown(line)
            if task:
                tasks.append(task)

        expected = post.metadata.get("count")
        if expected is not None and expected != len(tasks):
            logger.warning("Task file declares %s tasks but contains %d", expected, len(tasks))

        return tasks


class Storage:
    """File-based storage for the task list."""

    def __init__(self, config: ConfigModel):
        self.config = config
        self.path = config.get_tasks_path()

    def load(self) -> List[Task]:
        """Load the saved tasks; a missing file means an empty list.

        Raises:
            StorageError: if the file exists but cannot be read or parsed
        """
        if not self.path.exists():
            logger.info("No task file at %s, starting with an empty list", self.path)
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                content = f.read()
            tasks = TaskFileFormat.from_markdown(content)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error("Error loading tasks from %s: %s", self.path, e)
            raise StorageError(f"Could not load tasks from {self.path}: {e}") from e

        logger.info("Loaded %d task(s) from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: List[Task]) -> bool:
        """Save the tasks, replacing the task file in one step."""
        content = TaskFileFormat.to_markdown(tasks)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".tasks-", suffix=".md")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(content)
                os.replace(tmp_name, self.path)
            except OSError:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error("Error saving tasks to %s: %s", self.path, e)
            return False

        logger.info("Saved %d task(s) to %s", len(tasks), self.path)
        return True
