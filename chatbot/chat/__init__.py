"""
Chat engine, context building and relay client components.
"""

# Submodules are imported lazily to avoid circular dependencies
# Use: from chatbot.chat.engine import ChatEngine

__all__ = ["actions", "client", "context_builder", "engine", "prompts"]
