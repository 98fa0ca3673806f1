"""Turn a raw input line into a command.

The parser never talks to the task list. It only decides which command a
line describes, so malformed structure (a missing argument) becomes an
:class:`Invalid` command with a usage hint, while a task number that is
not a number is raised as :class:`NumericFormatError` for the caller to
report.
"""

import logging
import re
from typing import List

from .commands import (
    AddTask,
    Command,
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
from .errors import NumericFormatError


logger = logging.getLogger(__name__)

EXIT_KEYWORDS = {"bye", "quit", "exit"}
ADD_KEYWORDS = {"todo", "event", "deadline", "fixed"}
REMOVE_KEYWORDS = {"delete", "remove"}

DONE_USAGE = "You can mark tasks as done!\nE.g. 'done 1' or 'done all'"
REMOVE_USAGE = "You can remove tasks from the list!\nE.g. 'remove 1' or 'remove all'"
FIND_USAGE = "You can filter your list using keywords!\nE.g. 'find assignment'"
SORT_USAGE = "You can sort by: name, type, datetime\nE.g. 'sort name'"
START_USAGE = "You can set a fixed task's date time!\nE.g. 'start 1 today 23:00'"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def tokenize(line: str) -> List[str]:
    """Split a line on single spaces.

    "a user  input " -> ["a", "user", "", "input"]

    Trailing empty tokens are dropped, but at least one token is always
    returned so the keyword lookup works on empty input.
    """
    tokens = line.split(" ")
    while len(tokens) > 1 and tokens[-1] == "":
        tokens.pop()
    return tokens


def get_task_description(tokens: List[str]) -> str:
    """Everything after the keyword, re-joined with single spaces.

    "event lecture /at today 10:00" -> "lecture /at today 10:00"
    """
    return " ".join(tokens[1:])


def parse_task_number(token: str, message: str = "Invalid task number!") -> int:
    """Parse a task number token.

    Raises:
        NumericFormatError: if the token is not an optionally signed integer
    """
    if not _INTEGER_RE.fullmatch(token):
        raise NumericFormatError(token, message)
    return int(token)


def _parse_selection(tokens: List[str], command_cls, usage: str) -> Command:
    if len(tokens) < 2:
        return Invalid(usage)
    selection = tokens[1]
    if selection == "all":
        return command_cls()
    return command_cls(parse_task_number(selection))


def parse(line: str) -> Command:
    """Generate the command described by one line of user input.

    The first token, lower-cased, picks the command. Everything else is
    case-sensitive.

    Args:
        line: The raw input line

    Returns:
        Exactly one command; unrecognised input gives an Invalid command

    Raises:
        NumericFormatError: if a task number is not an integer
    """
    tokens = tokenize(line)
    keyword = tokens[0].lower()
    command = _dispatch(keyword, tokens)
    logger.debug("Parsed %r as %r", line, command)
    return command


def _dispatch(keyword: str, tokens: List[str]) -> Command:
    if keyword in EXIT_KEYWORDS:
        return Exit()

    if keyword in ADD_KEYWORDS:
        return AddTask(keyword, get_task_description(tokens))

    if keyword == "done":
        return _parse_selection(tokens, MarkDone, DONE_USAGE)

    if keyword == "list":
        return ListAll()

    if keyword in REMOVE_KEYWORDS:
        return _parse_selection(tokens, Remove, REMOVE_USAGE)

    if keyword == "find":
        if len(tokens) < 2:
            return Invalid(FIND_USAGE)
        return Find(tokens[1])

    if keyword == "help":
        return Help()

    if keyword == "sort":
        if len(tokens) < 2:
            return Invalid(SORT_USAGE)
        return Sort(tokens[1])

    if keyword == "start":
        if len(tokens) < 2:
            return Invalid(START_USAGE)
        index = parse_task_number(tokens[1], "Invalid fixed task number!")
        if len(tokens) < 4:
            return Invalid(START_USAGE)
        value = f"{tokens[2]} {tokens[3]}".strip()
        if not value:
            return Invalid(START_USAGE)
        return SetSchedule(index, value)

    return Invalid()
