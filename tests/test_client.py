"""Tests for the relay HTTP client."""

import asyncio
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import httpx
import pytest
from chatbot.chat.client import CompletionError, RelayClient

ENDPOINT = "http://relay.test/api/chat"
MESSAGES = [{"role": "user", "content": "hi"}]


def make_client(handler) -> RelayClient:
    """Relay client backed by a mock transport."""
    return RelayClient(ENDPOINT, timeout=5.0, transport=httpx.MockTransport(handler))


def complete(client: RelayClient) -> str:
    return asyncio.run(
        client.complete(MESSAGES, model="test-model", max_tokens=800, temperature=0.7)
    )


class TestRelayClient:
    """Test relay request and response handling."""

    def test_success(self):
        """The 'response' field is returned."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"response": "Hello!", "usage": {}})

        assert complete(make_client(handler)) == "Hello!"
        assert seen["method"] == "POST"
        assert seen["url"] == ENDPOINT
        assert seen["body"] == {
            "messages": MESSAGES,
            "model": "test-model",
            "max_tokens": 800,
            "temperature": 0.7,
        }

    def test_non_200_status(self):
        """Relay errors raise CompletionError."""
        client = make_client(
            lambda request: httpx.Response(500, json={"error": "Internal server error"})
        )
        with pytest.raises(CompletionError, match="500"):
            complete(client)

    def test_invalid_json(self):
        """A body that is not JSON raises CompletionError."""
        client = make_client(lambda request: httpx.Response(200, text="<html>oops</html>"))
        with pytest.raises(CompletionError):
            complete(client)

    def test_missing_response_field(self):
        """JSON without completion text raises CompletionError."""
        client = make_client(lambda request: httpx.Response(200, json={"usage": {}}))
        with pytest.raises(CompletionError):
            complete(client)

    def test_network_error(self):
        """Transport failures raise CompletionError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(CompletionError, match="Relay request failed"):
            complete(make_client(handler))

    @pytest.mark.parametrize("endpoint", ["http://example.com:99999/api/chat", "http://[::1/api/chat"])
    def test_malformed_endpoint(self, endpoint):
        """A broken relay URL is reported like any other relay failure."""
        client = RelayClient(endpoint, timeout=5.0)
        with pytest.raises(CompletionError, match="Relay request failed"):
            complete(client)
