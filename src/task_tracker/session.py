"""The read-parse-execute-save loop."""

import logging
from typing import Optional

from .commands import Command
from .config import ConfigModel
from .errors import TaskTrackerError
from .parser import parse
from .storage import Storage
from .task_list import TaskList
from .ui import Ui


logger = logging.getLogger(__name__)


class Session:
    """Ties the parser, the task list, storage and the console together.

    Tasks are loaded once at start-up and written back after every command
    that changes them.
    """

    def __init__(self, config: ConfigModel, ui: Optional[Ui] = None, storage: Optional[Storage] = None):
        self.config = config
        self.ui = ui or Ui(boxed=config.boxed_output, no_color=config.no_color)
        self.storage = storage or Storage(config)
        self.tasks = TaskList(self.storage.load(), symbols=config.use_symbols)

    def execute(self, line: str) -> Command:
        """Parse and run one line, showing the result.

        Raises:
            TaskTrackerError: if the command cannot be applied; the list is
                left unchanged
        """
        command = parse(line)
        message = command.execute(self.tasks)
        if command.mutates and not self.storage.save(self.tasks.tasks):
            self.ui.show_error(f"Could not save your tasks to {self.storage.path}")
        self.ui.show_message(message)
        return command

    def handle(self, line: str) -> bool:
        """Run one line, reporting errors instead of raising.

        Returns:
            True when the line asked to exit
        """
        try:
            return self.execute(line).is_exit
        except TaskTrackerError as e:
            logger.info("Command %r failed: %s", line, e.message)
            self.ui.show_error(e.message, e.suggestions)
            return False

    def run(self) -> None:
        """Read and run commands until the user exits."""
        self.ui.show_welcome(self.config.show_banner)
        try:
            while True:
                line = self.ui.read_command()
                if self.handle(line):
                    break
        except KeyboardInterrupt:
            logger.info("Interrupted, leaving the command loop")
            self.ui.show_message("Interrupted. Bye!")
