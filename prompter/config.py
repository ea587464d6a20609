import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional, TextIO

USE_DEFAULT_ENV_VAR = "PROMPTER_USE_DEFAULT"


def is_terminal(stream: Optional[TextIO]) -> bool:
    """Return True when the stream is attached to an interactive terminal."""
    if stream is None:
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError, OSError):
        # closed or detached streams
        return False


@dataclass(frozen=True)
class PromptEnvironment:
    """Process-level facts that decide whether prompts may read input."""

    force_default: bool = False
    is_interactive: bool = True


def detect_environment(
    environ: Optional[Mapping[str, str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> PromptEnvironment:
    """Inspect the environment variable and the standard streams once.

    Args:
        environ (Mapping, optional): Defaults to ``os.environ``
        stdin (TextIO, optional): Defaults to ``sys.stdin``
        stdout (TextIO, optional): Defaults to ``sys.stdout``

    Returns:
        PromptEnvironment: The detected flags
    """
    environ = os.environ if environ is None else environ
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    return PromptEnvironment(
        force_default=bool(environ.get(USE_DEFAULT_ENV_VAR)),
        is_interactive=is_terminal(stdin) and is_terminal(stdout),
    )
