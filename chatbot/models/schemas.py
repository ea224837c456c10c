"""
Pydantic models for the portfolio assistant and its relay API.
"""

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..chat.actions import QuickAction

Role = Literal["system", "user", "assistant"]


class Turn(BaseModel):
    """One message exchanged in the conversation."""
    model_config = ConfigDict(frozen=True)

    role: Role = Field(..., description="Message role: 'system', 'user' or 'assistant'")
    content: str = Field(..., description="Message content")
    timestamp: datetime = Field(default_factory=datetime.now)


class ChatReply(BaseModel):
    """Reply surfaced to whatever renders the chat."""
    content: str = Field(..., description="Reply text (may contain markdown)")
    quick_actions: Optional[list[QuickAction]] = Field(
        None, description="Follow-up actions offered with the reply"
    )
    rejected: bool = Field(
        False, description="True when the message was refused by the input policy"
    )


class RelayMessage(BaseModel):
    """A single prompt message forwarded by the relay."""
    role: Role = Field(..., description="Message role")
    content: str = Field(..., description="Message content")


class RelayRequest(BaseModel):
    """Request body accepted by the completion relay."""
    messages: list[RelayMessage] = Field(..., description="Ordered prompt messages")
    model: Optional[str] = Field(None, description="Model identifier")
    max_tokens: int = Field(800, gt=0, description="Maximum output tokens")
    temperature: float = Field(0.7, ge=0.0, le=2.0, description="Sampling temperature")


class RelayResponse(BaseModel):
    """Successful relay response."""
    response: str = Field(..., description="Completion text")
    usage: dict[str, Any] = Field(default_factory=dict, description="Token usage reported upstream")


class RelayError(BaseModel):
    """Error body returned by the relay."""
    error: str = Field(..., description="Short error label")
    message: Optional[str] = Field(None, description="Human readable detail")
