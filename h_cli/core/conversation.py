"""The cached conversation and the JSON file it lives in."""

import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Dict, Any

from .config import DEFAULT_MODEL

# A single, persistent system message ensures the model knows its answer is
# printed to a terminal and may be piped into other programs.
SYSTEM_PROMPT = (
    "You are an AI assistant answering a single prompt from a Unix command "
    "line. Your answer is printed to standard output and may be piped into "
    "other programs, so prefer plain text, keep formatting minimal and wrap "
    "code in fenced blocks only when it helps."
)


class ConversationFormatError(ValueError):
    """The cache file does not hold a JSON-encoded conversation."""

    def __init__(self, path: Path):
        super().__init__(
            f'Expected file "{path}" to contain a JSON-encoded conversation with GPT.'
        )
        self.path = path


class Conversation:
    """The turns exchanged with the model so far."""

    def __init__(
        self,
        model: str,
        messages: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        self.model = model
        self.messages: List[Dict[str, Any]] = messages or []

        # Ensure the very first message is our fixed system prompt. It is
        # inserted only once so replaying a cached conversation does not
        # stack copies of it.
        if not self.messages or self.messages[0].get("role") != "system":
            self.messages.insert(0, {"role": "system", "content": SYSTEM_PROMPT})

    def add_user_message(self, content: str) -> None:
        self.messages.append({"role": "user", "content": content})

    def add_assistant_message(self, content: str) -> None:
        self.messages.append({"role": "assistant", "content": content})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": self.messages,
            "updated_at": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        }

    @classmethod
    def from_dict(cls, data: Any, default_model: str) -> "Conversation":
        """Build a conversation from decoded JSON, raising ``TypeError`` on bad shapes."""
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        messages = data.get("messages", [])
        if not isinstance(messages, list) or not all(isinstance(m, dict) for m in messages):
            raise TypeError("'messages' must be a list of objects")
        return cls(model=data.get("model") or default_model, messages=messages)


class ConversationStore:
    """Reads and writes the most recent conversation as a single JSON file."""

    def __init__(self, path: Path, default_model: str = DEFAULT_MODEL) -> None:
        self.path = Path(path)
        self.default_model = default_model

    def load(self) -> Optional[Conversation]:
        """Return the cached conversation, or ``None`` when nothing is cached."""
        if not self.path.exists():
            return None
        content = self.path.read_text(encoding="utf-8")
        if not content.strip():
            return None
        try:
            return Conversation.from_dict(json.loads(content), self.default_model)
        except (ValueError, TypeError) as exc:
            raise ConversationFormatError(self.path) from exc

    def save(self, conversation: Conversation) -> None:
        tmp_path = self.path.with_suffix(".tmp")
        # If any unexpected non-serializable objects slip through we coerce
        # them to strings to avoid breaking the cache.
        tmp_path.write_text(
            json.dumps(conversation.to_dict(), ensure_ascii=False, indent=2, default=str),
            encoding="utf-8",
        )
        tmp_path.replace(self.path)
