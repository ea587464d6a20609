import argparse
import sys
from typing import List, Optional

from loguru import logger
from pydantic import ValidationError

from prompter.models import InvalidAnswerError, PromptConfig
from prompter.prompter import Prompter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prompter",
        description="Ask a question on the terminal and print the answer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Yes/no question defaulting to yes
  python -m prompter "Continue?" -c y -c n -i -d y

  # Numbered menu
  python -m prompter "Pick a fruit" --menu -c apple -c banana --default-item 1

Set PROMPTER_USE_DEFAULT=1 to answer every question with its default.
        """,
    )
    parser.add_argument("message", help="Question to display")
    parser.add_argument(
        "--choice", "-c",
        dest="choices",
        action="append",
        default=[],
        help="Allowed answer (repeatable)",
    )
    parser.add_argument("--default", "-d", default="", help="Answer for an empty line")
    parser.add_argument(
        "--ignore-case", "-i", action="store_true", help="Match choices case-insensitively"
    )
    parser.add_argument(
        "--pattern", "-p", help="Regular expression the answer must match"
    )
    parser.add_argument("--no-echo", action="store_true", help="Hide the typed answer")
    parser.add_argument(
        "--menu", action="store_true", help="Show choices as a numbered menu"
    )
    parser.add_argument(
        "--default-item",
        type=int,
        default=0,
        help="Menu item (1-based) used for an empty line",
    )
    parser.add_argument("--menu-prompt", default="", help="Replaces 'Choose'")
    parser.add_argument(
        "--use-default", action="store_true", help="Answer with the default without asking"
    )
    parser.add_argument(
        "--max-attempts", type=int, help="Give up after this many invalid answers"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")
        logger.enable("prompter")

    try:
        config = PromptConfig.for_process(
            message=args.message,
            choices=tuple(args.choices),
            ignore_case=args.ignore_case,
            default=args.default,
            default_menu_item=args.default_item,
            validation_pattern=args.pattern,
            no_echo=args.no_echo,
            use_default=args.use_default,
            is_menu=args.menu,
            menu_prompt=args.menu_prompt,
            max_attempts=args.max_attempts,
        )
    except ValidationError as e:
        print(f"Invalid options: {e}", file=sys.stderr)
        return 2

    prompter = Prompter(config=config)
    try:
        answer = prompter.prompt()
    except InvalidAnswerError as e:
        print(f"No valid answer given (last: {e.answer!r})", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130

    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
