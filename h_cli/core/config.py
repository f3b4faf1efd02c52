"""Runtime configuration, the model allow-list and data-directory setup."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DATA_DIR_NAME = ".h-data"
LATEST_FILE_NAME = "latest.json"
DEFAULT_EDITOR = "vi"
DEFAULT_MODEL = "gpt-3.5-turbo"

# Supported models
SUPPORTED_MODELS = [
    "gpt-4",
    "gpt-4-0314",
    "gpt-4-32k",
    "gpt-4-32k-0314",
    "gpt-3.5-turbo",  # default
    "gpt-3.5-turbo-0301",
]


@dataclass(frozen=True)
class Config:
    """Paths and settings resolved once at startup."""

    data_dir: Path
    editor: str = DEFAULT_EDITOR

    @property
    def latest_file(self) -> Path:
        return self.data_dir / LATEST_FILE_NAME

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        home: Optional[Path] = None,
    ) -> "Config":
        env = os.environ if environ is None else environ
        home = Path.home() if home is None else Path(home)
        return cls(
            data_dir=home / DATA_DIR_NAME,
            editor=env.get("EDITOR") or DEFAULT_EDITOR,
        )


def validate_model(model: str) -> str:
    """Return *model* unchanged or raise ``ValueError`` listing the choices."""
    if model not in SUPPORTED_MODELS:
        formatted = "\n".join(f"  {m}" for m in SUPPORTED_MODELS)
        raise ValueError(f"Model '{model}' does not exist, choose one from:\n{formatted}")
    return model


def init_data_dir(config: Config) -> None:
    """Create the data directory and an empty cache file if they are missing.

    Existing content is never truncated. Filesystem errors other than
    "already exists" propagate.
    """
    config.data_dir.mkdir(parents=True, exist_ok=True)
    config.latest_file.touch(exist_ok=True)
