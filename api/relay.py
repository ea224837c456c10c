"""Upstream completion calls for the chat relay."""

import logging
from typing import Optional

import anthropic

from chatbot.models.schemas import RelayMessage, RelayRequest, RelayResponse
from config import Config, get_config

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """The hosted language model did not return a usable completion."""


def split_system_messages(messages: list[RelayMessage]) -> tuple[str, list[dict]]:
    """
    Separate system messages from the conversation.

    The Messages API takes system instructions as a separate parameter, so
    system messages are joined in order and the remaining user/assistant
    messages are forwarded unchanged.
    """
    system_parts = []
    conversation = []
    for message in messages:
        if message.role == "system":
            system_parts.append(message.content)
        else:
            conversation.append({"role": message.role, "content": message.content})
    return "\n\n".join(system_parts), conversation


class CompletionRelay:
    """Forwards relay requests to the Anthropic Messages API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        config: Optional[Config] = None,
        client=None,
    ):
        self.api_key = api_key
        self.config = config or get_config()
        self._client = client

    @property
    def configured(self) -> bool:
        """True when an upstream credential is available."""
        return bool(self.api_key)

    @property
    def client(self):
        """Get or create the Anthropic client."""
        if self._client is None:
            self._client = anthropic.AsyncAnthropic(api_key=self.api_key)
        return self._client

    async def complete(self, request: RelayRequest) -> RelayResponse:
        """
        Run one completion.

        Raises:
            UpstreamError: When the API call fails or the reply has no text.
        """
        system, messages = split_system_messages(request.messages)
        if not messages:
            raise UpstreamError("No user or assistant messages to send")

        params = {
            "model": request.model or self.config.llm_model,
            "max_tokens": request.max_tokens,
            "temperature": request.temperature,
            "messages": messages,
        }
        if system:
            params["system"] = system

        try:
            response = await self.client.messages.create(**params)
        except anthropic.APIError as e:
            raise UpstreamError(f"Anthropic API error: {e}") from e

        text = "".join(
            block.text for block in response.content if getattr(block, "type", "") == "text"
        )
        if not text:
            raise UpstreamError("Anthropic response contained no text")

        usage = {
            "input_tokens": response.usage.input_tokens,
            "output_tokens": response.usage.output_tokens,
        }
        logger.debug(f"Completion finished: {usage}")
        return RelayResponse(response=text, usage=usage)
