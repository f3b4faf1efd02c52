"""Command-line entry point: parse flags, gather the prompt, print the answer."""
from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from . import __version__
from .core import (
    Config,
    Conversation,
    ConversationStore,
    DEFAULT_MODEL,
    init_data_dir,
    open_editor,
    validate_model,
)
from .core.client import OpenAIClientWrapper
from .utils import Ansi, console, err_console

DESCRIPTION = """\
Query GPT models from the safety of your terminal.
Unix-friendly for use within bash pipelines."""

# ---------------------------------------------------------------------------
# Help rendering
# ---------------------------------------------------------------------------


def _section_title(section: str) -> Optional[str]:
    first_line = section.split("\n", 1)[0]
    if first_line.startswith("usage:"):
        return "usage:"
    if first_line.endswith(":") and not first_line[:1].isspace():
        return first_line
    return None


def render_help(help_text: str, prog: str = "h") -> Text:
    """Drop the "Commands" and "For more ..." sections and bold every title.

    The program name in the usage line is shown in bold red.
    """
    blocks: List[Text] = []
    for section in help_text.strip("\n").split("\n\n"):
        title = _section_title(section)
        if title is not None:
            name = title.rstrip(":")
            if name == "Commands" or name.startswith("For more"):
                continue
        block = Text(section)
        if title is not None:
            block.stylize(Ansi.BOLD, 0, len(title))
        if title == "usage:" and section.startswith(f"usage: {prog}"):
            start = len("usage: ")
            block.stylize(f"{Ansi.FG_RED} {Ansi.BOLD}", start, start + len(prog))
        blocks.append(block)
    rendered = Text("\n\n").join(blocks)
    rendered.append("\n")
    return rendered


class HelpParser(argparse.ArgumentParser):
    """``ArgumentParser`` whose help output is rendered through rich."""

    def print_help(self, file=None) -> None:  # type: ignore[override]
        out = console if file is None else Console(file=file)
        out.print(render_help(self.format_help(), self.prog), soft_wrap=True, highlight=False)

    def error(self, message: str):  # type: ignore[override]
        """Report a usage error and exit with status 1 like every other failure."""
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = HelpParser(
        prog="h",
        usage="%(prog)s [...flags]",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s/{__version__}")
    parser.add_argument(
        "-m", "--model", default=DEFAULT_MODEL, help=f"Which GPT model to use (default: {DEFAULT_MODEL})"
    )
    parser.add_argument("-p", "--prompt", help="The prompt to send GPT")
    parser.add_argument(
        "-c",
        "--continue",
        dest="continue_",
        action="store_true",
        help="Continue from the last conversation",
    )
    return parser


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------


def run(
    args: argparse.Namespace,
    config: Config,
    store: ConversationStore,
    dispatcher: OpenAIClientWrapper,
    read_prompt: Callable[[Config], str] = open_editor,
) -> str:
    """Run one query and return the answer.

    Steps happen strictly in order: validate the model, make sure the data
    directory exists, load the cached conversation when continuing, obtain
    the prompt (from the editor if none was given), ask the model and cache
    the resulting conversation. Any failure propagates to the caller.
    """
    model = validate_model(args.model)
    init_data_dir(config)

    conversation: Optional[Conversation] = None
    if args.continue_:
        conversation = store.load()

    prompt = args.prompt
    if not prompt:
        prompt = read_prompt(config)

    if conversation is None:
        conversation = Conversation(model=model)

    answer = dispatcher.ask(prompt, model, conversation)
    store.save(conversation)
    return answer


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = Config.from_env()
        store = ConversationStore(config.latest_file, default_model=args.model)
        answer = run(args, config, store, OpenAIClientWrapper())
    except Exception as exc:  # every failure is reported the same way
        err_console.print(
            Ansi.style(escape(str(exc)), Ansi.FG_RED), soft_wrap=True, highlight=False, emoji=False
        )
        return 1
    except KeyboardInterrupt:
        err_console.print()
        err_console.print(Ansi.style("interrupted", Ansi.FG_RED), highlight=False)
        return 1

    # Plain print: the answer must reach stdout byte for byte.
    print(answer)
    return 0


def run_cli() -> None:  # pragma: no cover
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover
    run_cli()
