"""Configuration for the portfolio assistant."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class Config:
    """Configuration for the portfolio assistant."""

    # Static profile document loaded once at startup
    knowledge_base_path: Path = field(
        default_factory=lambda: Path(__file__).parent / "knowledge" / "knowledge_base.json"
    )

    # Relay endpoint the chat engine posts prompts to
    relay_url: str = "http://localhost:8000/api/chat"
    request_timeout: float = 30.0

    # LLM settings
    llm_model: str = "claude-sonnet-4-5-20250929"
    llm_max_tokens: int = 800
    llm_temperature: float = 0.7

    # Conversation settings
    history_window: int = 6  # last 3 user/assistant exchanges
    max_message_length: int = 500
    min_seconds_between_messages: float = 2.0

    # Identity used when the knowledge base cannot be loaded
    owner_name: str = "Alex Morgan"
    owner_title: str = "Data Scientist"
    owner_summary: str = "Data Scientist specializing in AI/ML"


# Global default configuration
_default_config: Optional[Config] = None


def get_config() -> Config:
    """Get the default configuration."""
    global _default_config
    if _default_config is None:
        _default_config = Config()
    return _default_config


def set_config(config: Config) -> None:
    """Set the default configuration."""
    global _default_config
    _default_config = config
