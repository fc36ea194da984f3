import re

import pytest

from gitdemo.core.classifier import CommandClassifier, classify
from gitdemo.core.render import render_command
from gitdemo.core.tables import DEFAULT_TABLES, GIT_BANNER, CommandTables
from gitdemo.core.types import (
    ParsedCommand,
    PseudoResult,
    UnsupportedMethod,
    UnsupportedOption,
    UnsupportedTopLevel,
)
from gitdemo.signals import RefreshNotifier


def test_empty_line_is_blank_pseudo_result() -> None:
    assert classify("") == PseudoResult(message="")


def test_shell_listing_is_a_pseudo_command() -> None:
    assert classify("ls -la") == PseudoResult(message="DontWorryAboutFilesInThisDemo.txt")


def test_change_directory_is_a_pseudo_command() -> None:
    result = classify("cd /tmp")
    assert isinstance(result, PseudoResult)
    assert result.message.startswith("Directory Changed to")


def test_bare_git_prints_banner() -> None:
    assert classify("git") == PseudoResult(message=GIT_BANNER)


def test_refresh_emits_signal_once() -> None:
    notifier = RefreshNotifier()
    calls: list[str] = []
    notifier.subscribe(lambda: calls.append("refresh"))
    classifier = CommandClassifier(notifier=notifier)

    assert classifier.classify("refresh") == PseudoResult(message="Refreshing tree...")
    assert calls == ["refresh"]


def test_non_pseudo_input_does_not_emit_refresh() -> None:
    notifier = RefreshNotifier()
    calls: list[str] = []
    notifier.subscribe(lambda: calls.append("refresh"))
    classifier = CommandClassifier(notifier=notifier)

    classifier.classify("git commit")
    classifier.classify("refresh now")
    assert calls == []


def test_unknown_top_level_is_rejected() -> None:
    assert classify("svn status") == UnsupportedTopLevel()


def test_unknown_method_reports_attempted_text() -> None:
    assert classify("git fetch") == UnsupportedMethod(attempted="fetch")


def test_method_must_be_a_whole_word() -> None:
    assert classify("git addition") == UnsupportedMethod(attempted="addition")


def test_git_with_trailing_space_has_no_method() -> None:
    assert classify("git ") == UnsupportedMethod(attempted="")


def test_shortcut_preserves_trailing_options() -> None:
    expected = ParsedCommand(method="commit", options={"--amend": []}, general_args=[])
    assert classify("gc --amend") == expected
    assert classify("git commit --amend") == expected


@pytest.mark.parametrize(
    ("alias", "method"),
    [("gc", "commit"), ("ga", "add"), ("gchk", "checkout"), ("gr", "rebase"), ("gb", "branch")],
)
def test_bare_shortcut_expands_to_method(alias: str, method: str) -> None:
    assert classify(alias) == ParsedCommand(method=method)


def test_shortcut_must_be_a_whole_word() -> None:
    assert classify("gcx") == UnsupportedTopLevel()


def test_unsupported_option_propagates() -> None:
    assert classify("git commit -m 'message'") == UnsupportedOption(method="commit", option="-m")


def test_checkout_branch_with_general_args() -> None:
    result = classify("gchk -b feature")
    assert result == ParsedCommand(method="checkout", options={"-b": ["feature"]}, general_args=[])


def test_option_lookup_distinguishes_empty_from_absent() -> None:
    result = classify("git reset --soft")
    assert isinstance(result, ParsedCommand)
    assert result.option("--soft") == []
    assert result.option("--hard") is None


def test_later_shortcut_rewrites_earlier_expansion() -> None:
    tables = CommandTables(
        pseudo_commands=(),
        shortcuts={
            "git commit": re.compile(r"^c($|\s)"),
            "git branch": re.compile(r"^git commit($|\s)"),
        },
        methods=DEFAULT_TABLES.methods,
        supported_options=DEFAULT_TABLES.supported_options,
    )
    classifier = CommandClassifier(tables)
    assert classifier.expand_shortcuts("c topic") == "git branch topic"
    assert classifier.classify("c topic") == ParsedCommand(method="branch", general_args=["topic"])


def test_pseudo_command_wins_over_shortcut() -> None:
    tables = CommandTables(
        pseudo_commands=DEFAULT_TABLES.pseudo_commands,
        shortcuts={"git commit": re.compile(r"^ls($|\s)")},
        methods=DEFAULT_TABLES.methods,
        supported_options=DEFAULT_TABLES.supported_options,
    )
    assert CommandClassifier(tables).classify("ls") == PseudoResult(message="DontWorryAboutFilesInThisDemo.txt")


@pytest.mark.parametrize(
    "line",
    [
        "git commit",
        "gc --amend",
        "git commit -am 'two words'",
        "git branch -d one two -D three",
        "git branch topic -d old",
        "git checkout main",
        "gchk -b feature",
        "git reset --hard HEAD~1",
        'git merge "spaced name" other',
        "git add ''",
    ],
)
def test_rendered_command_parses_back_to_itself(line: str) -> None:
    first = classify(line)
    assert isinstance(first, ParsedCommand)
    assert classify(render_command(first)) == first
