"""Spinner shown on the terminal while waiting for the model."""
from __future__ import annotations

import sys
from typing import Optional

from yaspin import yaspin


class Spinner:
    """Display a small spinner with *text* while work is done.

    Nothing is drawn unless stdout is a terminal, so piped output only ever
    contains the answer.
    """

    def __init__(self, text: str = "", enabled: Optional[bool] = None):
        if enabled is None:
            enabled = sys.stdout.isatty()
        self._enabled = enabled
        self._started = False
        self._spinner = yaspin(text=text) if enabled else None

    def start(self) -> None:
        if self._started or self._spinner is None:
            return
        self._spinner.start()
        self._started = True

    def stop(self) -> None:
        if not self._started:
            return
        self._spinner.stop()
        self._started = False

    def __enter__(self) -> "Spinner":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
