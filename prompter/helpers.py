"""Shortcuts for the common kinds of questions.

Every helper reads the process environment (``PROMPTER_USE_DEFAULT`` and the
TTY state of stdin/stdout) unless an explicit ``environment`` is passed, and
accepts ``inputer`` / ``interface`` overrides for custom terminals.
"""

from re import Pattern
from typing import Optional, Sequence, Union

from prompter.config import PromptEnvironment
from prompter.inputer import BaseInputer, ConsoleInputer
from prompter.interface import ConsoleInterface
from prompter.models import PromptConfig
from prompter.prompter import Prompter


def _ask(
    inputer: Optional[BaseInputer],
    interface: Optional[ConsoleInterface],
    environment: Optional[PromptEnvironment],
    **fields,
) -> str:
    config = PromptConfig.for_process(environment=environment, **fields)
    prompter = Prompter(
        config=config,
        inputer=inputer or ConsoleInputer(),
        interface=interface or ConsoleInterface(),
    )
    return prompter.prompt()


def prompt(
    message: str,
    default: str = "",
    inputer: Optional[BaseInputer] = None,
    interface: Optional[ConsoleInterface] = None,
    environment: Optional[PromptEnvironment] = None,
) -> str:
    """Ask for free text."""
    return _ask(inputer, interface, environment, message=message, default=default)


def _ask_bool(
    message: str,
    yes: str,
    no: str,
    default: bool,
    inputer: Optional[BaseInputer],
    interface: Optional[ConsoleInterface],
    environment: Optional[PromptEnvironment],
) -> bool:
    answer = _ask(
        inputer,
        interface,
        environment,
        message=message,
        choices=(yes, no),
        ignore_case=True,
        default=yes if default else no,
    )
    return answer.lower() == yes


def yes_no(
    message: str,
    default: bool = True,
    inputer: Optional[BaseInputer] = None,
    interface: Optional[ConsoleInterface] = None,
    environment: Optional[PromptEnvironment] = None,
) -> bool:
    """Ask a ``(yes/no)`` question, case insensitive."""
    return _ask_bool(message, "yes", "no", default, inputer, interface, environment)


def yn(
    message: str,
    default: bool = True,
    inputer: Optional[BaseInputer] = None,
    interface: Optional[ConsoleInterface] = None,
    environment: Optional[PromptEnvironment] = None,
) -> bool:
    """Ask a ``(y/n)`` question, case insensitive."""
    return _ask_bool(message, "y", "n", default, inputer, interface, environment)


def password(
    message: str,
    inputer: Optional[BaseInputer] = None,
    interface: Optional[ConsoleInterface] = None,
    environment: Optional[PromptEnvironment] = None,
) -> str:
    """Ask for hidden input."""
    return _ask(inputer, interface, environment, message=message, no_echo=True)


def choose(
    message: str,
    choices: Sequence[str],
    default: str = "",
    inputer: Optional[BaseInputer] = None,
    interface: Optional[ConsoleInterface] = None,
    environment: Optional[PromptEnvironment] = None,
) -> str:
    """Ask for one of ``choices`` (exact match)."""
    return _ask(
        inputer,
        interface,
        environment,
        message=message,
        choices=tuple(choices),
        default=default,
    )


def match(
    message: str,
    pattern: Union[str, Pattern[str]],
    default: str = "",
    inputer: Optional[BaseInputer] = None,
    interface: Optional[ConsoleInterface] = None,
    environment: Optional[PromptEnvironment] = None,
) -> str:
    """Ask for an answer matching ``pattern``."""
    return _ask(
        inputer,
        interface,
        environment,
        message=message,
        validation_pattern=pattern,
        default=default,
    )


def menu(
    message: str,
    items: Sequence[str],
    default_item: int = 0,
    inputer: Optional[BaseInputer] = None,
    interface: Optional[ConsoleInterface] = None,
    environment: Optional[PromptEnvironment] = None,
) -> str:
    """Show a numbered menu and return the chosen 1-based index as a string."""
    return _ask(
        inputer,
        interface,
        environment,
        message=message,
        choices=tuple(items),
        is_menu=True,
        default_menu_item=default_item,
    )
