"""Command classification core."""

from .classifier import CommandClassifier, classify
from .options import parse_options, tokenize
from .render import failure_message, render_command
from .tables import DEFAULT_TABLES, CommandTables, PseudoCommand, build_default_tables
from .types import (
    ClassifyResult,
    ParsedCommand,
    ParsedOptions,
    ParseFailure,
    PseudoResult,
    UnsupportedMethod,
    UnsupportedOption,
    UnsupportedTopLevel,
)

__all__ = [
    "DEFAULT_TABLES",
    "ClassifyResult",
    "CommandClassifier",
    "CommandTables",
    "ParseFailure",
    "ParsedCommand",
    "ParsedOptions",
    "PseudoCommand",
    "PseudoResult",
    "UnsupportedMethod",
    "UnsupportedOption",
    "UnsupportedTopLevel",
    "build_default_tables",
    "classify",
    "failure_message",
    "parse_options",
    "render_command",
    "tokenize",
]
