import re

from prompter.formatting import build_error_message, build_prompt_message
from prompter.models import PromptConfig


def test_plain_message():
    config = PromptConfig(message="Your name")
    assert build_prompt_message(config) == "Your name: "


def test_message_with_choices_and_default():
    config = PromptConfig(message="Continue?", choices=["y", "n"], default="y")
    assert build_prompt_message(config) == "Continue? (y/n) [y]: "


def test_message_with_default_only():
    config = PromptConfig(message="Host", default="localhost")
    assert build_prompt_message(config) == "Host [localhost]: "


def test_menu_message():
    config = PromptConfig(
        message="Pick a fruit",
        choices=["apple", "banana", "cherry"],
        is_menu=True,
        default_menu_item=2,
    )
    assert build_prompt_message(config) == (
        "Pick a fruit\n---\n [1] apple\n [2] banana\n [3] cherry\nChoose [2]: "
    )


def test_menu_message_custom_prompt_without_default():
    config = PromptConfig(
        message="Pick", choices=["a"], is_menu=True, menu_prompt="Number"
    )
    assert build_prompt_message(config) == "Pick\n---\n [1] a\nNumber: "


def test_menu_ignores_text_default():
    config = PromptConfig(message="Pick", choices=["a"], is_menu=True, default="a")
    assert build_prompt_message(config).endswith("Choose: ")


def test_error_for_pattern():
    config = PromptConfig(message="Age", validation_pattern=re.compile(r"^\d+$"))
    assert build_error_message(config) == r"# Answer should match /^\d+$/"


def test_error_for_single_choice():
    config = PromptConfig(message="Type it", choices=["ok"])
    assert build_error_message(config) == "# Enter `ok`"


def test_error_for_many_choices():
    config = PromptConfig(message="Letter", choices=["a", "b", "c"])
    assert build_error_message(config) == "# Enter `a`, `b` or `c`"


def test_error_for_two_choices():
    config = PromptConfig(message="Continue?", choices=["y", "n"])
    assert build_error_message(config) == "# Enter `y` or `n`"


def test_error_is_empty_for_menu_and_free_text():
    menu = PromptConfig(message="Pick", choices=["a", "b"], is_menu=True)
    free = PromptConfig(message="Anything")
    assert build_error_message(menu) == ""
    assert build_error_message(free) == ""


def test_pattern_error_wins_over_choices():
    config = PromptConfig(
        message="Letter", choices=["a", "b"], validation_pattern="[a-z]"
    )
    assert build_error_message(config) == "# Answer should match /[a-z]/"
