from dataclasses import dataclass, field

from rich.console import Console
from rich.control import Control


@dataclass
class ConsoleInterface:
    """All terminal output of a prompt goes through here."""

    console: Console = field(default_factory=Console)

    def _write(self, text: str, end: str = "") -> None:
        # Unrendered, so tabs and control characters reach the terminal as given.
        self.console.file.write(text + end)
        self.console.file.flush()

    def print_prompt(self, message: str) -> None:
        self._write(message)

    def print_error(self, message: str) -> None:
        # An empty message still ends the line.
        self._write(message, end="\n")

    def clear_screen(self) -> None:
        """Move the cursor home and clear the screen (``ESC[H`` ``ESC[2J``)."""
        self.console.control(Control.home(), Control.clear())
