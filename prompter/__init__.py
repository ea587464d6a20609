from loguru import logger

from prompter.config import (
    USE_DEFAULT_ENV_VAR,
    PromptEnvironment,
    detect_environment,
    is_terminal,
)
from prompter.helpers import choose, match, menu, password, prompt, yes_no, yn
from prompter.models import InvalidAnswerError, PromptConfig
from prompter.prompter import Prompter

__version__ = "0.1.0"

# Log records would interleave with prompts; applications opt in.
logger.disable("prompter")

__all__ = [
    "USE_DEFAULT_ENV_VAR",
    "InvalidAnswerError",
    "PromptConfig",
    "PromptEnvironment",
    "Prompter",
    "choose",
    "detect_environment",
    "is_terminal",
    "match",
    "menu",
    "password",
    "prompt",
    "yes_no",
    "yn",
]
