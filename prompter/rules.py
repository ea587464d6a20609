import re
from typing import Optional

from prompter.models import PromptConfig

ACCEPT_ALL = re.compile(r".*")
MENU_INDEX = re.compile(r"[0-9]{2,}|[1-9]")
# Integer syntax accepted for a menu index: optional sign, ASCII digits.
_INTEGER = re.compile(r"[+-]?[0-9]+", re.ASCII)


def build_validation_rule(config: PromptConfig) -> re.Pattern:
    """Derive the pattern an answer must match.

    An explicit ``validation_pattern`` always wins. Without choices every
    answer is accepted. Menus accept index tokens. A choice list accepts
    exactly one of its (literal) choices.
    """
    if config.validation_pattern is not None:
        return config.validation_pattern
    if not config.choices:
        return ACCEPT_ALL
    if config.is_menu:
        return MENU_INDEX

    alternatives = "|".join(re.escape(choice) for choice in config.choices)
    flags = re.IGNORECASE if config.ignore_case else 0
    return re.compile(rf"\A(?:{alternatives})\Z", flags)


def parse_menu_index(answer: str) -> Optional[int]:
    if not _INTEGER.fullmatch(answer):
        return None
    return int(answer)


def input_is_valid(config: PromptConfig, answer: str) -> bool:
    """Check an answer (after default substitution) against the config."""
    matched = build_validation_rule(config).search(answer) is not None
    if not config.is_menu or not matched:
        return matched

    index = parse_menu_index(answer)
    if index is None:
        return False
    # Upper bound is one past the last item; kept for compatibility.
    return index <= len(config.choices) + 1
