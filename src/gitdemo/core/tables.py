"""Fixed command tables shared by the classifier and option parser."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from gitdemo.errors import OptionTableMissingError

TOP_LEVEL_KEYWORD = "git"

GIT_BANNER = "\n".join(
    [
        "Git Version",
        "PCOTTLE.1.0",
        "Usage:",
        "  git <command> [<args>]",
    ]
)


@dataclass(frozen=True)
class PseudoCommand:
    """Input handled outside the git grammar."""

    name: str
    pattern: re.Pattern[str]
    message: str
    refresh: bool = False


def _word(token: str) -> re.Pattern[str]:
    # Either end of string or a space must follow, so "add" never matches "addition".
    return re.compile(rf"^{re.escape(token)}($|\s)")


@dataclass(frozen=True)
class CommandTables:
    """Read-only tables, validated once at construction."""

    pseudo_commands: tuple[PseudoCommand, ...]
    shortcuts: Mapping[str, re.Pattern[str]]
    methods: Mapping[str, re.Pattern[str]]
    supported_options: Mapping[str, frozenset[str]]
    keyword: str = field(default=TOP_LEVEL_KEYWORD)

    def __post_init__(self) -> None:
        for method in self.methods:
            if method not in self.supported_options:
                raise OptionTableMissingError(method)
        object.__setattr__(self, "shortcuts", MappingProxyType(dict(self.shortcuts)))
        object.__setattr__(self, "methods", MappingProxyType(dict(self.methods)))
        object.__setattr__(
            self,
            "supported_options",
            MappingProxyType({method: frozenset(flags) for method, flags in self.supported_options.items()}),
        )

    def options_for(self, method: str) -> frozenset[str]:
        """Flags accepted by ``method``."""
        try:
            return self.supported_options[method]
        except KeyError:
            raise OptionTableMissingError(method) from None


def build_default_tables() -> CommandTables:
    return CommandTables(
        pseudo_commands=(
            PseudoCommand("ls", re.compile(r"^ls"), "DontWorryAboutFilesInThisDemo.txt"),
            PseudoCommand("cd", re.compile(r"^cd"), "Directory Changed to '/directories/dont/matter/in/this/demo'"),
            PseudoCommand("git", re.compile(r"^git$"), GIT_BANNER),
            PseudoCommand("refresh", re.compile(r"^refresh$"), "Refreshing tree...", refresh=True),
        ),
        shortcuts={
            "git commit": _word("gc"),
            "git add": _word("ga"),
            "git checkout": _word("gchk"),
            "git rebase": _word("gr"),
            "git branch": _word("gb"),
        },
        methods={
            name: _word(name) for name in ("commit", "add", "checkout", "rebase", "reset", "branch", "revert", "merge")
        },
        # Presence means accepted as a pass-through flag; absence means rejected.
        supported_options={
            "commit": frozenset({"--amend", "-a", "-am"}),
            "add": frozenset(),
            "branch": frozenset({"-d", "-D"}),
            "checkout": frozenset({"-b"}),
            "reset": frozenset({"--hard", "--soft"}),
            "merge": frozenset(),
            "rebase": frozenset(),
            "revert": frozenset(),
        },
    )


DEFAULT_TABLES = build_default_tables()
