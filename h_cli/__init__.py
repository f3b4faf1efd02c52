"""Query GPT models from the safety of your terminal.

Features
--------
1. One-shot prompts: `h -p "explain this error"` prints the answer and nothing else, so it can sit inside a
   bash pipeline.
2. Editor prompts: without `-p`, `$EDITOR` (default `vi`) is opened to compose the prompt. Every composed prompt is
   archived under `~/.h-data/` as `prompt_<timestamp>_<first-words>.txt`.
3. Follow-ups: `-c` replays the last conversation, cached in `~/.h-data/latest.json`, before the new prompt.

Run `python -m h_cli` or use the `h` console script.
"""
__version__ = "1.0.0"

# Re-export useful symbols for convenience
from .core import (
    Config,
    Conversation,
    ConversationStore,
    SUPPORTED_MODELS,
    SYSTEM_PROMPT,
)
from .core.client import OpenAIClientWrapper
from .cli import main, run, run_cli

__all__ = [
    "Config",
    "Conversation",
    "ConversationStore",
    "SUPPORTED_MODELS",
    "SYSTEM_PROMPT",
    "OpenAIClientWrapper",
    "main",
    "run",
    "run_cli",
    "__version__",
]
