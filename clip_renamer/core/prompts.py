"""
Interactive console input and colored status output.

The pipeline only talks to a ``Prompter``; tests pass a scripted one.
"""

from typing import Optional, Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt


class Prompter(Protocol):
    def ask(self, question: str, password: bool = False) -> str: ...

    def confirm(self, question: str, default: bool = False) -> bool: ...

    def status(self, message: str, style: str = "cyan") -> None: ...


class ConsolePrompter:
    """Prompter backed by a rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def ask(self, question: str, password: bool = False) -> str:
        return Prompt.ask(question, console=self.console, password=password)

    def confirm(self, question: str, default: bool = False) -> bool:
        return Confirm.ask(question, console=self.console, default=default)

    def status(self, message: str, style: str = "cyan") -> None:
        self.console.print(f"[{style}]{message}[/{style}]")

    def pause(self, message: str = "Press Enter to exit") -> None:
        self.console.input(f"[dim]{message}[/dim] ")
