"""
HTTP client for the completion relay.
"""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class CompletionError(Exception):
    """The relay could not produce a completion."""


class RelayClient:
    """Posts assembled prompts to the completion relay."""

    def __init__(
        self,
        endpoint: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the relay client.

        Args:
            endpoint: Full URL of the relay's chat endpoint.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (in-process app or mock).
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self.transport = transport

    async def complete(
        self,
        messages: list[dict],
        model: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        """
        Request a completion for the given prompt messages.

        Returns:
            The completion text.

        Raises:
            CompletionError: On network errors, non-200 responses or a
                response body without completion text.
        """
        payload = {
            "messages": messages,
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(self.endpoint, json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise CompletionError(f"Relay request failed: {e}") from e

        if response.status_code != 200:
            logger.error(f"Relay error {response.status_code}: {response.text[:200]}")
            raise CompletionError(f"Relay returned status {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise CompletionError("Relay returned invalid JSON") from e

        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str):
            raise CompletionError("Relay response has no completion text")

        return text
