"""
Pydantic models for the assistant and relay API.
"""

# Submodules are imported lazily to avoid circular dependencies
# Use: from chatbot.models.schemas import Turn

__all__ = ["schemas"]
