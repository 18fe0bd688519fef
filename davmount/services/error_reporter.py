"""Error Reporter - shows a terminal failure to the user."""

from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text


class ErrorReporter(ABC):
    """Abstract presentation layer for run failures."""

    @abstractmethod
    def report_error(self, primary: str, secondary: Optional[str] = None) -> None:
        pass


class RichErrorReporter(ErrorReporter):
    """Prints the error as a red panel on stderr."""

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console(stderr=True)

    def report_error(self, primary: str, secondary: Optional[str] = None) -> None:
        # Text objects so manifest content is never interpreted as markup
        body = Text(secondary) if secondary else Text("")
        self._console.print(
            Panel(
                body,
                title=Text(primary, style="bold"),
                title_align="left",
                border_style="red",
                expand=False,
            )
        )
