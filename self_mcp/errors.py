"""Exception types raised while configuring and serving the Self tool."""

from __future__ import annotations

__all__ = [
    "SelfMcpError",
    "ConfigurationError",
    "HelpRequested",
    "UnknownToolError",
]

HELP_HINT = "Run with --help to see available options"


class SelfMcpError(Exception):
    """Base class for all self-mcp errors."""


class ConfigurationError(SelfMcpError):
    """Invalid command-line or environment configuration.

    Carries the main diagnostic plus optional hint lines (valid alternatives,
    expected formats) shown underneath it.
    """

    def __init__(self, message: str, *hints: str) -> None:
        super().__init__(message)
        self.message = message
        self.hints = tuple(hints)

    def render(self) -> str:
        return "\n".join([f"ERROR: {self.message}", *self.hints])


class HelpRequested(SelfMcpError):
    """Raised by the argument parser when --help/-h is reached.

    Not a failure: the entry point prints ``usage`` and exits with status 0.
    """

    def __init__(self, usage: str) -> None:
        super().__init__("help requested")
        self.usage = usage


class UnknownToolError(SelfMcpError, ValueError):
    """A tool call named a tool this server does not expose."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown tool: {name}")
        self.name = name
