"""Terminal output for the CLI."""

from .terminal import TerminalNotifier

__all__ = ["TerminalNotifier"]
