"""Terminal front-end for the translation proxy."""

from __future__ import annotations

import argparse
import logging
import os
from typing import Callable, Sequence

from unitrans.shared.log_levels import LOG_LEVELS, log_level_from_env

from .controller import DEFAULT_SERVER_URL, TranslationController
from .presentation import AUTO_LANGUAGE, TranslatorPresenter, TranslatorView

HELP_TEXT = """Commands:
  :from CODE      set the source language (or 'auto')
  :to CODE        set the target language
  :swap           swap languages and texts (disabled while source is auto)
  :history        show recent translations
  :select N       restore history entry N
  :clear          clear the history
  :copy           copy the translation to the clipboard
  :speak          read the translation aloud
  :languages      list available languages
  :stats          show session statistics
  :help           show this help
  :quit           exit
Any other input is translated."""

Output = Callable[[str], None]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Translate text through the translation proxy.",
    )
    parser.add_argument(
        "--server",
        default=os.getenv("UNITRANS_SERVER_URL", DEFAULT_SERVER_URL),
        help="Proxy base URL (default: %(default)s)",
    )
    parser.add_argument("--from", dest="source", default=AUTO_LANGUAGE)
    parser.add_argument("--to", dest="target", default="en")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=log_level_from_env("WARNING"),
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("text", nargs="*", help="Text to translate once and exit")
    return parser


def handle_command(presenter: TranslatorPresenter, line: str, output: Output) -> bool:
    """Apply one line of shell input. Returns ``False`` when the shell should exit."""

    command, _, argument = line.strip().partition(" ")
    argument = argument.strip()

    if command in {":quit", ":q", ":exit"}:
        return False
    if command == ":help":
        output(HELP_TEXT)
    elif command == ":from":
        try:
            presenter.set_source_language(argument)
        except ValueError as error:
            output(f"Error: {error}")
        else:
            output(presenter.render_panels())
    elif command == ":to":
        try:
            presenter.set_target_language(argument)
        except ValueError as error:
            output(f"Error: {error}")
        else:
            output(presenter.render_panels())
    elif command == ":swap":
        if presenter.swap():
            output(presenter.render_panels())
        else:
            output("Cannot swap while the source language is auto-detected")
    elif command == ":history":
        output(presenter.render_history())
    elif command == ":select":
        try:
            presenter.select(int(argument))
        except (ValueError, IndexError) as error:
            output(f"Error: {error}")
        else:
            output(presenter.render_panels())
    elif command == ":clear":
        presenter.clear_history()
        output("History cleared")
    elif command == ":copy":
        output("Copied" if presenter.copy() else "Nothing copied")
    elif command == ":speak":
        if not presenter.speak():
            output("Speech is unavailable")
    elif command == ":languages":
        output(presenter.render_languages())
    elif command == ":stats":
        output(presenter.render_stats())
    elif command.startswith(":"):
        output(f"Unknown command {command}; type :help")
    elif line.strip():
        presenter.set_source_text(line)
        presenter.translate()
        output(presenter.render_panels())
    return True


def run_shell(
    presenter: TranslatorPresenter,
    *,
    read: Callable[[str], str] = input,
    output: Output = print,
) -> int:
    output("Universal Translator: type text to translate, :help for commands.")
    while True:
        try:
            line = read("> ")
        except (EOFError, KeyboardInterrupt):
            output("")
            return 0
        if not handle_command(presenter, line, output):
            return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    controller: TranslationController | None = None,
) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    controller = controller or TranslationController(args.server)
    controller.load_languages()
    if controller.languages_error:
        print(f"Warning: {controller.languages_error}; using built-in languages")

    presenter = TranslatorPresenter(
        controller,
        view=TranslatorView(source_language=args.source, target_language=args.target),
    )

    if args.text:
        result = controller.translate(" ".join(args.text), args.source, args.target)
        if result is None:
            print(f"Error: {controller.error or 'nothing to translate'}")
            return 1
        print(result.translated_text)
        return 0

    return run_shell(presenter)


if __name__ == "__main__":
    raise SystemExit(main())
