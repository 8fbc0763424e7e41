"""OpenAI client wrapper for plain chat completions."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import openai
from openai import OpenAI  # type: ignore

from ..utils import ASSISTANT_LABEL, Spinner

LOGGER = logging.getLogger(__name__)


class CompletionError(Exception):
    """The remote completion failed; carries only a description."""


class OpenAIClientWrapper:
    """Thin request/response wrapper around the OpenAI Python SDK.

    No streaming and no retries: one call either returns the reply text or
    raises :class:`CompletionError`.
    """

    def __init__(self, client: OpenAI):
        self.client = client

    def chat_completion(self, model: str, messages: List[Dict[str, Any]]) -> str:
        LOGGER.debug("requesting completion from %s with %d messages", model, len(messages))

        spinner = Spinner(prefix=f"{ASSISTANT_LABEL}> ")
        spinner.start()
        try:
            response = self.client.chat.completions.create(  # type: ignore[arg-type]
                model=model,
                messages=messages,
            )
        except openai.OpenAIError as e:
            raise CompletionError(str(e)) from e
        finally:
            spinner.stop()

        choices = getattr(response, "choices", None)
        if not choices:
            raise CompletionError("the API returned no choices")

        content = choices[0].message.content
        return content or ""
