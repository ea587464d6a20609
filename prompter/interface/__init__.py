from prompter.interface.console import ConsoleInterface

__all__ = ["ConsoleInterface"]
