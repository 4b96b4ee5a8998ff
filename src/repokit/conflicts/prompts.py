"""Line-based operator prompts.

The resolver only talks to a Prompter, so tests can script answers
without touching stdin.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from rich.console import Console


class Prompter(ABC):
    """Ask the operator a question and show informational lines."""

    @abstractmethod
    def ask(self, prompt: str) -> str:
        """Show prompt and return the raw line the operator typed."""

    @abstractmethod
    def say(self, message: str) -> None:
        """Show a line of text."""


class ConsolePrompter(Prompter):
    """Prompter backed by a Rich console reading stdin."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False)

    def ask(self, prompt: str) -> str:
        return self.console.input(prompt, markup=False)

    def say(self, message: str) -> None:
        self.console.print(message, markup=False)
