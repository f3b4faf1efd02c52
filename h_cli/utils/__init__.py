from .ansi import Ansi, console, err_console
from .spinner import Spinner

__all__ = [
    "Ansi",
    "console",
    "err_console",
    "Spinner",
]
