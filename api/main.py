"""
FastAPI relay between the portfolio chat widget and the hosted language model.

The relay keeps the model credential on the server. The widget posts the
assembled prompt; the relay forwards it upstream and returns the completion
text.

Usage:
    uvicorn api.main:app --reload --port 8000

Endpoints:
    POST    /api/chat     {messages, model, max_tokens, temperature} -> {response, usage}
    OPTIONS /api/chat     CORS preflight
    GET     /api/health   health check
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

# Load .env file
load_dotenv(Path(__file__).parent.parent / ".env")

# Get API key from environment
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY")

from api.relay import CompletionRelay, UpstreamError
from chatbot.models.schemas import RelayError, RelayRequest
from config import get_config

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Portfolio Assistant Relay",
    description="Relays portfolio chat prompts to a hosted language model",
    version="1.0.0",
)

# Any origin may call the relay; every chat response carries these headers
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

_relay: Optional[CompletionRelay] = None


def get_relay() -> CompletionRelay:
    """Get or create the relay instance."""
    global _relay
    if _relay is None:
        _relay = CompletionRelay(api_key=ANTHROPIC_API_KEY, config=get_config())
    return _relay


def error_response(status_code: int, error: str, message: Optional[str] = None) -> JSONResponse:
    """JSON error body in the relay's ``{"error", "message"}`` shape."""
    body = RelayError(error=error, message=message).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body, headers=CORS_HEADERS)


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "portfolio-assistant-relay",
        "version": "1.0.0",
        "model": get_config().llm_model,
    }


@app.options("/api/chat")
async def chat_preflight():
    """Answer CORS preflight requests, from any origin, with an empty 200."""
    return Response(status_code=200, headers=CORS_HEADERS)


@app.api_route("/api/chat", methods=["GET", "PUT", "PATCH", "DELETE"])
async def chat_method_not_allowed():
    """Only POST is accepted on the chat endpoint."""
    return error_response(405, "Method not allowed")


@app.post("/api/chat")
async def chat(request: Request, relay: CompletionRelay = Depends(get_relay)):
    """
    Relay a prompt to the language model.

    - **messages**: ordered list of ``{role, content}``
    - **model**: optional model identifier
    - **max_tokens**: maximum output tokens (default 800)
    - **temperature**: sampling temperature (default 0.7)
    """
    try:
        payload = await request.json()
        relay_request = RelayRequest.model_validate(payload)
    except (ValueError, ValidationError):
        return error_response(400, "Invalid messages format")

    if not relay.configured:
        logger.error("ANTHROPIC_API_KEY not configured")
        return error_response(
            500, "Internal server error", "The assistant is temporarily unavailable"
        )

    try:
        result = await relay.complete(relay_request)
    except UpstreamError as e:
        logger.error(f"Relay error: {e}")
        return error_response(
            500, "Internal server error", "Upstream completion request failed"
        )

    return JSONResponse(content=result.model_dump(), headers=CORS_HEADERS)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
