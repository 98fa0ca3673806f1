"""Exceptions raised by the task tracker core.

Every error a user can trigger derives from :class:`TaskTrackerError`. The
session renders the message and keeps reading commands, so none of these
are fatal.
"""

from typing import List, Optional


class TaskTrackerError(Exception):
    """Base class for user-facing task tracker errors."""

    def __init__(self, message: str, suggestions: Optional[List[str]] = None):
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(message)


class EmptyDescriptionError(TaskTrackerError):
    """Raised when a task is created with a blank description."""

    def __init__(self, message: str = "Description cannot be empty!"):
        super().__init__(message, suggestions=["E.g. 'todo read book'"])


class MalformedTaskDescriptionError(TaskTrackerError):
    """Raised when a deadline or event lacks its date/time separator."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(
            f"Invalid {kind} description!",
            suggestions=[
                "E.g. 'deadline return book /by Aug 26 2020 23:59'",
                "E.g. 'event project meeting /at Feb 14 2021 19:00'",
            ],
        )


class InvalidTaskNumberError(TaskTrackerError):
    """Raised when a task number does not refer to a task in the list."""

    def __init__(self, message: str = "Invalid task number!"):
        super().__init__(message)


class AlreadyDoneError(TaskTrackerError):
    """Raised when marking a completed task as done again."""

    def __init__(self, message: str = "Task is already done!"):
        super().__init__(message)


class NumericFormatError(TaskTrackerError):
    """Raised when a task number token is not an integer."""

    def __init__(self, token: str, message: str = "Invalid task number!"):
        self.token = token
        super().__init__(message)


class InvalidSortKeyError(TaskTrackerError):
    """Raised when sorting by a key the task list does not support."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(
            "You can sort by: name, type, datetime",
            suggestions=["E.g. 'sort name'"],
        )


class StorageError(TaskTrackerError):
    """Raised when the task file exists but cannot be read back."""
