from prompter.models import PromptConfig

DEFAULT_MENU_PROMPT = "Choose"


def build_prompt_message(config: PromptConfig) -> str:
    """Render the text shown before reading an answer.

    Plain prompts look like ``Continue? (y/n) [y]: ``. Menus list every
    choice with its 1-based index under a ``---`` rule and end with
    ``Choose [2]: `` (or the configured menu prompt).
    """
    if config.is_menu:
        message = config.message + "\n---\n"
        for index, choice in enumerate(config.choices, start=1):
            message += f" [{index}] {choice}\n"
        message += config.menu_prompt or DEFAULT_MENU_PROMPT
        if config.default_menu_item != 0:
            message += f" [{config.default_menu_item}]"
        return message + ": "

    message = config.message
    if config.choices:
        message += f" ({'/'.join(config.choices)})"
    if config.default:
        message += f" [{config.default}]"
    return message + ": "


def build_error_message(config: PromptConfig) -> str:
    """Render the hint printed after a rejected answer, or ``""``."""
    if config.validation_pattern is not None:
        return f"# Answer should match /{config.validation_pattern.pattern}/"

    if not config.choices or config.is_menu:
        return ""

    if len(config.choices) == 1:
        return f"# Enter `{config.choices[0]}`"

    leading = ", ".join(f"`{choice}`" for choice in config.choices[:-1])
    return f"# Enter {leading} or `{config.choices[-1]}`"
