"""Rich console presentation for the task tracker.

The core only produces finished message strings. This module decides how
they look on the terminal.
"""

from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

from . import __version__


TASK_TRACKER_THEME = Theme({
    "message": "#B7C5D3",
    "muted": "#4F5B66",
    "error": "#F78C6C bold",
    "primary": "#68D5F3 bold",
    "border": "#41505E",
})

LOGO = r"""
 _            _      _                  _
| |_ __ _ ___| | __ | |_ _ __ __ _  ___| | _____ _ __
| __/ _` / __| |/ / | __| '__/ _` |/ __| |/ / _ \ '__|
| || (_| \__ \   <  | |_| | | (_| | (__|   <  __/ |
 \__\__,_|___/_|\_\  \__|_|  \__,_|\___|_|\_\___|_|
"""


class Ui:
    """Renders messages, errors and the welcome banner."""

    def __init__(self, console: Optional[Console] = None, boxed: bool = True, no_color: bool = False):
        self.console = console or Console(theme=TASK_TRACKER_THEME, no_color=no_color)
        self.boxed = boxed

    def _render(self, text: str, style: str, title: Optional[str] = None) -> None:
        # Text() keeps user-entered brackets from being read as markup
        body = Text(text, style=style)
        if self.boxed:
            self.console.print(Panel(body, title=title, border_style="border", expand=False))
        else:
            self.console.print(body)

    def show_welcome(self, show_banner: bool = True) -> None:
        if show_banner:
            self.console.print(Text(LOGO, style="primary"))
        self._render(
            f"Hello! I'm your task tracker (v{__version__}).\nWhat can I do for you?",
            "message",
        )

    def show_message(self, text: str) -> None:
        self._render(text, "message")

    def show_error(self, text: str, suggestions: Optional[List[str]] = None) -> None:
        if suggestions:
            text = "\n".join([text] + [f"  \u2022 {s}" for s in suggestions])
        self._render(text, "error", title="Error")

    def read_command(self) -> str:
        """Read one line of input; end of input reads as 'bye'."""
        try:
            return self.console.input(">> ").rstrip("\r\n")
        except EOFError:
            return "bye"
