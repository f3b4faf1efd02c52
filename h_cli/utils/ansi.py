"""Colour and styling helpers built on :mod:`rich`."""

import os
from rich.console import Console


# Help goes to stdout and status and errors to stderr. Answers bypass rich.
console = Console()
err_console = Console(stderr=True)


class Ansi:
    """Lightweight collection of style names used throughout the app."""

    BOLD = "bold"

    FG_YELLOW = "yellow"
    FG_RED = "red"

    @staticmethod
    def style(text: str, *codes: str) -> str:
        """Return *text* wrapped in rich markup unless ``NO_COLOR`` is set."""
        if os.getenv("NO_COLOR") is not None:
            return text
        style = " ".join(codes)
        return f"[{style}]{text}[/]"
