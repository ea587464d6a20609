from re import Pattern
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from prompter.config import PromptEnvironment, detect_environment


class InvalidAnswerError(Exception):
    """Raised when an answer is rejected and no attempts are left."""

    def __init__(self, answer: str, message: str = ""):
        self.answer = answer
        super().__init__(message or f"Invalid answer: {answer!r}")


class PromptConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    choices: Tuple[str, ...] = ()
    ignore_case: bool = False
    default: str = ""
    default_menu_item: int = Field(default=0, ge=0)  # 1-based, 0 means none
    # When both choices and a pattern are given, the pattern decides.
    validation_pattern: Optional[Pattern[str]] = None
    no_echo: bool = False
    use_default: bool = False
    is_menu: bool = False
    menu_prompt: str = ""

    # Sourced from detect_environment() by the application.
    force_default: bool = False
    is_interactive: bool = True

    max_attempts: Optional[int] = Field(default=None, ge=1)

    @classmethod
    def for_process(
        cls, environment: Optional[PromptEnvironment] = None, **fields
    ) -> "PromptConfig":
        """Build a config with the current process environment applied."""
        environment = environment or detect_environment()
        fields.setdefault("force_default", environment.force_default)
        fields.setdefault("is_interactive", environment.is_interactive)
        return cls(**fields)

    @property
    def skips_input(self) -> bool:
        return self.use_default or self.force_default or not self.is_interactive

    @property
    def fallback(self) -> str:
        """Answer substituted for an empty line."""
        if self.is_menu:
            return str(self.default_menu_item)
        return self.default
