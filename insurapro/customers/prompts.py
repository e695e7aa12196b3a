"""
Prompt sources for the interactive menu.

The menu only talks to a PromptSource, so tests can drive it with a
scripted list of replies instead of a terminal.
"""

from typing import Protocol

import typer


class PromptSource(Protocol):
    """Reads replies from and writes messages to the user."""

    def ask(self, text: str) -> str:
        """Show *text* and return the user's reply line."""
        ...

    def say(self, text: str = "") -> None:
        """Show a line of output."""
        ...


class ConsolePrompt:
    """PromptSource backed by the terminal via typer."""

    def ask(self, text: str) -> str:
        return typer.prompt(text, prompt_suffix=" ")

    def say(self, text: str = "") -> None:
        typer.echo(text)
