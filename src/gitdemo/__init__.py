"""gitdemo - parse git-like command lines for a sandboxed git demo."""

from .core import CommandClassifier, CommandTables, ParsedCommand, ParseFailure, PseudoResult, classify
from .signals import RefreshNotifier

__version__ = "0.1.0"

__all__ = [
    "CommandClassifier",
    "CommandTables",
    "ParseFailure",
    "ParsedCommand",
    "PseudoResult",
    "RefreshNotifier",
    "classify",
]
