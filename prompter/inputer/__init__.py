from prompter.inputer.base import BaseInputer
from prompter.inputer.console_inputer import ConsoleInputer

__all__ = ["BaseInputer", "ConsoleInputer"]
