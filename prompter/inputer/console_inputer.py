from dataclasses import dataclass, field
from typing import Optional, TextIO

from loguru import logger
from rich.console import Console


@dataclass
class ConsoleInputer:
    """Reads answers from standard input (or ``stream`` when given).

    Masked input always comes from the controlling terminal.

    Both readers fold end-of-stream and read errors into an empty answer so
    the prompt falls back to its default.
    """

    console: Console = field(default_factory=Console)
    stream: Optional[TextIO] = None

    def read_line(self) -> str:
        try:
            line = self.console.input(stream=self.stream)
        except (EOFError, OSError) as e:
            logger.debug(f"Line read failed, using empty answer: {e!r}")
            return ""
        return line.rstrip("\r\n")

    def read_password(self) -> str:
        try:
            return self.console.input(password=True)
        except (EOFError, OSError) as e:
            logger.debug(f"Masked read failed, using empty answer: {e!r}")
            # getpass only ends the line on success.
            self.console.file.write("\n")
            self.console.file.flush()
            return ""
