"""OpenAI client wrapper that sends a prompt and returns the answer."""

from __future__ import annotations

import os
from typing import Callable, Optional

from openai import OpenAI  # type: ignore

from ..utils import Spinner
from .conversation import Conversation


def default_client() -> OpenAI:
    """Build an OpenAI client from the environment.

    ``OPENAI_API_KEY`` is picked up by the SDK itself; ``OPENAI_BASE_URL``
    points the client at a proxy or self-hosted endpoint.
    """
    client_kwargs = {}
    base_url = os.getenv("OPENAI_BASE_URL")
    if base_url:
        client_kwargs["base_url"] = base_url
    return OpenAI(**client_kwargs)  # type: ignore[arg-type]


class OpenAIClientWrapper:
    """Thin wrapper around the OpenAI Python SDK.

    The client is created on first use so that argument and cache errors are
    reported before the SDK is asked for credentials.
    """

    def __init__(
        self,
        client: Optional[OpenAI] = None,
        client_factory: Callable[[], OpenAI] = default_client,
    ):
        self._client = client
        self._client_factory = client_factory

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self._client = self._client_factory()
        return self._client

    def ask(self, prompt: str, model: str, conversation: Conversation) -> str:
        """Send *prompt* on top of *conversation* and return the answer text.

        Both the prompt and the answer are appended to *conversation*. Errors
        from the SDK propagate unchanged.
        """
        conversation.add_user_message(prompt)
        conversation.model = model

        with Spinner(text=model):
            response = self.client.chat.completions.create(  # type: ignore[arg-type]
                model=model,
                messages=conversation.messages,
            )

        answer = response.choices[0].message.content or ""
        conversation.add_assistant_message(answer)
        return answer
