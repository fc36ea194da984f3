"""CLI renderer for gitdemo."""

import threading

from prompt_toolkit import PromptSession
from prompt_toolkit.patch_stdout import patch_stdout
from rich.console import Console
from rich.markup import escape

from gitdemo.core import ParsedCommand, ParseFailure, PseudoResult, failure_message, render_command


class Renderer:
    """CLI renderer using Rich for terminal output."""

    def __init__(self, console: Console | None = None, prompt: str = "$ ") -> None:
        self.console: Console = console or Console()
        self._prompt = prompt
        self._prompt_session: PromptSession[str] | None = None
        self._print_lock = threading.Lock()

    def info(self, message: str) -> None:
        """Render an info message."""
        self._print(escape(message))

    def error(self, message: str) -> None:
        """Render an error message."""
        self._print(f"[bold red]Error:[/bold red] {escape(message)}")

    def welcome(self) -> None:
        self._print("[bold blue]gitdemo[/bold blue] - type a git command, [dim]exit[/dim] to leave.")

    def refresh_notice(self) -> None:
        self._print("[dim]tree refresh requested[/dim]")

    def pseudo(self, result: PseudoResult) -> None:
        if result.message:
            self.info(result.message)

    def command(self, command: ParsedCommand) -> None:
        """Render a parsed command with its options and general args."""
        self._print(f"[bold green]{escape(render_command(command))}[/bold green]")
        for flag, args in command.options.items():
            rendered = ", ".join(args) if args else "(no args)"
            self._print(f"  [cyan]{escape(flag)}[/cyan] {escape(rendered)}")
        if command.general_args:
            self._print(f"  [magenta]args[/magenta] {escape(', '.join(command.general_args))}")

    def failure(self, failure: ParseFailure) -> None:
        self.error(failure_message(failure))

    def get_user_input(self) -> str:
        """Prompt user for input."""
        if self._prompt_session is None:
            self._prompt_session = PromptSession()
        with patch_stdout(raw=True):
            return self._prompt_session.prompt(self._prompt)

    def _print(self, message: str) -> None:
        with self._print_lock:
            self.console.print(message)
