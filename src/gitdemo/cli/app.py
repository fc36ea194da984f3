"""gitdemo command-line interface."""

from __future__ import annotations

import json
from typing import Protocol

import typer
from loguru import logger

from gitdemo.cli.render import Renderer
from gitdemo.config import Settings, get_settings
from gitdemo.core import ClassifyResult, CommandClassifier, ParsedCommand, ParseFailure, PseudoResult
from gitdemo.signals import RefreshNotifier

EXIT_COMMANDS = frozenset({"exit", "quit"})

app = typer.Typer(
    name="gitdemo",
    help="Parse git-like command lines for the git sandbox demo.",
    add_completion=False,
    rich_markup_mode="rich",
)


class InputSource(Protocol):
    def get_user_input(self) -> str: ...


def show_result(renderer: Renderer, result: ClassifyResult) -> None:
    if isinstance(result, ParsedCommand):
        renderer.command(result)
    elif isinstance(result, PseudoResult):
        renderer.pseudo(result)
    elif isinstance(result, ParseFailure):
        renderer.failure(result)


def run_repl(classifier: CommandClassifier, renderer: Renderer, source: InputSource | None = None) -> int:
    """Read lines until exit or EOF. Returns the number of lines classified."""

    source = source or renderer
    handled = 0
    while True:
        try:
            line = source.get_user_input()
        except (EOFError, KeyboardInterrupt):
            break
        if line.strip() in EXIT_COMMANDS:
            break
        result = classifier.classify(line)
        logger.info("repl.classified kind={} raw={}", result.kind, line)
        show_result(renderer, result)
        handled += 1
    return handled


def _build(settings: Settings) -> tuple[CommandClassifier, Renderer]:
    renderer = Renderer(prompt=settings.prompt)
    notifier = RefreshNotifier()
    notifier.subscribe(renderer.refresh_notice)
    return CommandClassifier(notifier=notifier), renderer


@app.command()
def parse(
    line: str = typer.Argument(..., help="Command line to classify"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Classify one line and print the outcome."""

    settings = get_settings()
    classifier, renderer = _build(settings)
    result = classifier.classify(line)

    use_json = as_json or settings.json_output
    if use_json:
        typer.echo(json.dumps(result.as_dict(), ensure_ascii=False))
    else:
        show_result(renderer, result)

    if isinstance(result, ParseFailure):
        raise typer.Exit(1)


@app.command()
def repl() -> None:
    """Start an interactive session."""

    settings = get_settings(log_profile="repl")
    classifier, renderer = _build(settings)
    renderer.welcome()
    run_repl(classifier, renderer)
