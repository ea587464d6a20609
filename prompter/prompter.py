from dataclasses import dataclass, field

from loguru import logger
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, stop_never

from prompter.formatting import build_error_message, build_prompt_message
from prompter.inputer import BaseInputer, ConsoleInputer
from prompter.interface import ConsoleInterface
from prompter.models import InvalidAnswerError, PromptConfig
from prompter.rules import input_is_valid


@dataclass
class Prompter:
    """Asks one question until an acceptable answer is given.

    Each attempt prints the prompt message, reads a line (masked when
    ``no_echo``), substitutes the default for an empty line and validates the
    result. Rejected answers print a hint and start a new attempt. Attempts
    are unbounded unless ``config.max_attempts`` is set, in which case
    ``InvalidAnswerError`` is raised once they run out.

    When input is skipped (``use_default``, ``force_default`` or a
    non-interactive process) the default is returned without reading.
    """

    config: PromptConfig
    inputer: BaseInputer = field(default_factory=ConsoleInputer)
    interface: ConsoleInterface = field(default_factory=ConsoleInterface)

    def prompt(self) -> str:
        stop = (
            stop_after_attempt(self.config.max_attempts)
            if self.config.max_attempts
            else stop_never
        )
        retrying = Retrying(
            stop=stop,
            retry=retry_if_exception_type(InvalidAnswerError),
            reraise=True,
        )

        try:
            return retrying(self._ask_once)
        except InvalidAnswerError as e:
            logger.warning(
                f"No valid answer after {self.config.max_attempts} attempts, "
                f"last answer: {e.answer!r}"
            )
            raise

    def _ask_once(self) -> str:
        self.interface.print_prompt(build_prompt_message(self.config))

        if self.config.skips_input:
            logger.debug(f"Input skipped, answering default {self.config.default!r}")
            return self.config.default

        answer = self._read()
        if answer == "":
            answer = self.config.fallback

        if input_is_valid(self.config, answer):
            return answer

        logger.debug(f"Rejected answer {answer!r}")
        error_message = build_error_message(self.config)
        self.interface.print_error(error_message)
        if self.config.is_menu:
            self.interface.clear_screen()
        raise InvalidAnswerError(answer, error_message)

    def _read(self) -> str:
        if self.config.no_echo:
            return self.inputer.read_password()
        return self.inputer.read_line()
