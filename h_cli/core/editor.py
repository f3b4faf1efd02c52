"""Compose a prompt in the user's text editor and archive it."""

from __future__ import annotations

import re
import shlex
import subprocess
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from rich.markup import escape

from ..utils import Ansi, err_console
from .config import Config

PLACEHOLDER = "Replace this file with your prompt."
PROMPT_WORDS = 5

_UNSAFE_CHARS = re.compile(r'[/\\?%*:|"<>]')


class EditorError(RuntimeError):
    """The editor exited with a non-zero status."""

    def __init__(self, returncode: int, path: Path):
        super().__init__(f"Editor exited with code: {returncode}")
        self.returncode = returncode
        self.path = path


def sanitize_file_name(word: str) -> str:
    """Replace characters that are unsafe in file names with ``#`` and lowercase."""
    return _UNSAFE_CHARS.sub("#", word).lower()


def _timestamp(now: datetime) -> str:
    # ISO-8601 in UTC with millisecond precision, e.g. 2023-03-20T12:34:56.789Z
    now = now.astimezone(timezone.utc)
    iso = now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
    return re.sub(r"[:.]", "-", iso)


def prompt_file_path(data_dir: Path, prompt: str, now: Optional[datetime] = None) -> Path:
    """Return the archive path for *prompt*, named after its first few words."""
    if now is None:
        now = datetime.now(timezone.utc)
    words = "-".join(sanitize_file_name(w) for w in prompt.split()[:PROMPT_WORDS])
    return Path(data_dir) / f"prompt_{_timestamp(now)}_{words}.txt"


def open_editor(config: Config) -> str:
    """Let the user write a prompt in ``$EDITOR`` and return its text.

    The file starts with a placeholder, is handed to the editor, and once the
    editor has exited successfully it is read back and renamed after the
    prompt's first words. On a non-zero exit the file is left where it is.
    """
    tmp_path = prompt_file_path(config.data_dir, "")
    tmp_path.write_text(PLACEHOLDER, encoding="utf-8")

    # Inherits stdin/stdout/stderr and blocks until the editor has exited.
    completed = subprocess.run([*shlex.split(config.editor), str(tmp_path)])
    if completed.returncode != 0:
        raise EditorError(completed.returncode, tmp_path)

    prompt = tmp_path.read_text(encoding="utf-8")
    new_path = prompt_file_path(config.data_dir, prompt)
    tmp_path.rename(new_path)

    err_console.print(Ansi.style("Saving prompt to:", Ansi.FG_YELLOW), escape(str(new_path)), highlight=False)
    return prompt
