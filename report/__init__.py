"""Terminal rendering for the portfolio assistant."""

from .console_reporter import ACTION_COMMANDS, ConsoleReporter

__all__ = [
    "ACTION_COMMANDS",
    "ConsoleReporter",
]
