"""Classify a raw input line into a git command, a pseudo result, or a failure."""

from __future__ import annotations

from loguru import logger

from gitdemo.core.options import parse_options
from gitdemo.core.tables import DEFAULT_TABLES, CommandTables
from gitdemo.core.types import (
    ClassifyResult,
    ParsedCommand,
    PseudoResult,
    UnsupportedMethod,
    UnsupportedOption,
    UnsupportedTopLevel,
)
from gitdemo.signals import RefreshNotifier


class CommandClassifier:
    """Turns one line of user input into a structured outcome."""

    def __init__(
        self,
        tables: CommandTables = DEFAULT_TABLES,
        notifier: RefreshNotifier | None = None,
    ) -> None:
        self._tables = tables
        self._notifier = notifier or RefreshNotifier()

    @property
    def tables(self) -> CommandTables:
        return self._tables

    @property
    def notifier(self) -> RefreshNotifier:
        return self._notifier

    def classify(self, raw: str) -> ClassifyResult:
        # A blank line is a no-op, not an error.
        if not raw:
            return PseudoResult(message="")

        pseudo = self._run_pseudo_command(raw)
        if pseudo is not None:
            return pseudo

        text = self.expand_shortcuts(raw)
        keyword = self._tables.keyword
        if text[: len(keyword)] != keyword:
            logger.debug("classify.top_level.rejected raw={}", raw)
            return UnsupportedTopLevel()

        return self._resolve_method(text[len(keyword) + 1 :])

    def expand_shortcuts(self, raw: str) -> str:
        """Rewrite an alias prefix into its canonical form, keeping the rest verbatim.

        Every shortcut is tried against the current text; a later match
        overwrites an earlier rewrite.
        """

        text = raw
        for canonical, pattern in self._tables.shortcuts.items():
            matched = pattern.match(text)
            if matched:
                text = f"{canonical} {text[len(matched.group(0)) :]}"
                logger.debug("classify.shortcut canonical={} text={}", canonical, text)
        return text

    def _run_pseudo_command(self, raw: str) -> PseudoResult | None:
        for command in self._tables.pseudo_commands:
            if command.pattern.match(raw) is None:
                continue
            logger.debug("classify.pseudo name={}", command.name)
            if command.refresh:
                self._notifier.emit()
            return PseudoResult(message=command.message)
        return None

    def _resolve_method(self, full_command: str) -> ParsedCommand | UnsupportedMethod | UnsupportedOption:
        for method, pattern in self._tables.methods.items():
            if pattern.match(full_command) is None:
                continue
            remainder = full_command[len(method) + 1 :]
            logger.debug("classify.method method={} remainder={}", method, remainder)
            parsed = parse_options(method, remainder, tables=self._tables)
            if isinstance(parsed, UnsupportedOption):
                return parsed
            return ParsedCommand(method=method, options=parsed.options, general_args=parsed.general_args)

        logger.debug("classify.method.rejected attempted={}", full_command)
        return UnsupportedMethod(attempted=full_command)


def classify(raw: str) -> ClassifyResult:
    """Classify ``raw`` with the default tables and a private notifier."""

    return CommandClassifier().classify(raw)
