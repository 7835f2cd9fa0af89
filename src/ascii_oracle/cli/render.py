"""CLI renderer for ASCII Oracle."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.patch_stdout import patch_stdout
from rich.console import Console

from ascii_oracle.core.commands import get_suggestions
from ascii_oracle.core.types import CommandResult, PowerUp


class SuggestionCompleter(Completer):
    """Complete whole command lines from the example list."""

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        text = document.text_before_cursor
        if not text.strip():
            return
        for suggestion in get_suggestions(text):
            yield Completion(suggestion, start_position=-len(text))


def result_style(result: CommandResult) -> str:
    match result.kind:
        case "error":
            return "bold red"
        case "warning":
            return "yellow"
        case "success":
            return "green"
        case "ascii":
            return "bright_green"
        case "math":
            return "cyan"
        case "info":
            return ""


class Renderer:
    """CLI renderer using Rich for terminal output."""

    def __init__(self, console: Console | None = None) -> None:
        self.console: Console = console or Console()
        self._prompt_session: PromptSession[str] | None = None
        self._print_lock = threading.Lock()

    def welcome(self, version: str) -> None:
        self._print(f"[bold green]ASCII Oracle[/bold green] v{version}")
        self._print('[dim]Type "help" for commands, "quit" to leave.[/dim]')

    def info(self, message: str) -> None:
        self._print(message)

    def error(self, message: str) -> None:
        self._print(f"[bold red]Error:[/bold red] {message}")

    def result(self, result: CommandResult) -> None:
        """Render a command result, one styled line at a time."""
        if result.clear_screen:
            self.console.clear()
        style = result_style(result)
        with self._print_lock:
            for line in result.lines():
                self.console.print(line, style=style, markup=False, highlight=False)

    def power_up(self, power_up: PowerUp) -> None:
        self._print(f"[bold magenta]★ {power_up.type.upper()}[/bold magenta] {power_up.message}")

    async def get_user_input(self, prompt: str = "> ") -> str:
        if self._prompt_session is None:
            # Created on first prompt so one-shot commands never touch the tty.
            self._prompt_session = PromptSession(
                history=InMemoryHistory(),
                completer=SuggestionCompleter(),
                complete_while_typing=True,
            )
        with patch_stdout(raw=True):
            return await self._prompt_session.prompt_async(prompt)

    def _print(self, message: str) -> None:
        with self._print_lock:
            self.console.print(message)


def create_cli_renderer() -> Renderer:
    """Create and return a Renderer instance."""
    return Renderer()
