"""Text renderings of parse outcomes."""

from __future__ import annotations

from gitdemo.core.tables import TOP_LEVEL_KEYWORD
from gitdemo.core.types import (
    ParsedCommand,
    ParseFailure,
    UnsupportedMethod,
    UnsupportedOption,
    UnsupportedTopLevel,
)


def _quote(token: str) -> str:
    if not token or any(ch.isspace() for ch in token):
        return f'"{token}"'
    return token


def render_command(command: ParsedCommand) -> str:
    """Reassemble a parsed command into input text that parses back to it.

    General args go before any flag so a flag cannot absorb them.
    """

    parts = [TOP_LEVEL_KEYWORD, command.method]
    parts.extend(_quote(arg) for arg in command.general_args)
    for flag, args in command.options.items():
        parts.append(flag)
        parts.extend(_quote(arg) for arg in args)
    return " ".join(parts)


def failure_message(failure: ParseFailure) -> str:
    if isinstance(failure, UnsupportedTopLevel):
        return "Git commands only, sorry!"
    if isinstance(failure, UnsupportedMethod):
        return f"Sorry, this demo does not support that git command: {failure.attempted}"
    if isinstance(failure, UnsupportedOption):
        return f'The option "{failure.option}" is not supported'
    raise TypeError(f"unknown parse failure: {failure!r}")
