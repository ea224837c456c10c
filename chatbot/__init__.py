"""
Portfolio chat assistant.

This package answers visitor questions about the portfolio owner by
injecting relevant knowledge base entries into prompts for a hosted
language model, with canned replies when the model is unreachable.
"""

# Submodules are imported lazily to avoid circular dependencies
# Use: from chatbot.chat.engine import ChatEngine

__all__ = ["history", "session"]
