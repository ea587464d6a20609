import io
from dataclasses import dataclass, field
from typing import List

import pytest
from rich.console import Console

from prompter.interface import ConsoleInterface


@dataclass
class ScriptedInputer:
    """Answers prompts from a fixed list; an exhausted script reads as EOF."""

    lines: List[str] = field(default_factory=list)
    passwords: List[str] = field(default_factory=list)
    line_reads: int = 0
    password_reads: int = 0

    def read_line(self) -> str:
        self.line_reads += 1
        return self.lines.pop(0) if self.lines else ""

    def read_password(self) -> str:
        self.password_reads += 1
        return self.passwords.pop(0) if self.passwords else ""

    @property
    def reads(self) -> int:
        return self.line_reads + self.password_reads


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def interface(output):
    console = Console(
        file=output, force_terminal=True, color_system=None, width=200
    )
    return ConsoleInterface(console=console)


@pytest.fixture
def scripted():
    def _make(*lines, passwords=()):
        return ScriptedInputer(lines=list(lines), passwords=list(passwords))

    return _make
