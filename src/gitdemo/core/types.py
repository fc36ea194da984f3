"""Parse outcomes produced by the command classifier."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, TypeAlias


@dataclass(frozen=True)
class ParsedOptions:
    """Option parser output: flags with their captured args plus general args."""

    options: dict[str, list[str]] = field(default_factory=dict)
    general_args: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ParsedCommand:
    """A recognized git command."""

    kind: ClassVar[str] = "command"

    method: str
    options: dict[str, list[str]] = field(default_factory=dict)
    general_args: list[str] = field(default_factory=list)

    def option(self, flag: str) -> list[str] | None:
        """Return the args captured after ``flag``, or None if it was not given."""
        return self.options.get(flag)

    def as_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "method": self.method,
            "options": {flag: list(args) for flag, args in self.options.items()},
            "general_args": list(self.general_args),
        }


@dataclass(frozen=True)
class PseudoResult:
    """Short-circuit result for demo commands and blank lines."""

    kind: ClassVar[str] = "pseudo"

    message: str

    def as_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "message": self.message}


@dataclass(frozen=True)
class ParseFailure:
    """Base for rejected input. Returned, never raised."""

    kind: ClassVar[str] = "failure"

    def as_dict(self) -> dict[str, Any]:
        return {"kind": self.kind}


@dataclass(frozen=True)
class UnsupportedTopLevel(ParseFailure):
    """Input does not start with the ``git`` keyword."""

    kind: ClassVar[str] = "unsupported_top_level"


@dataclass(frozen=True)
class UnsupportedMethod(ParseFailure):
    """``git`` was recognized but no method pattern matched."""

    kind: ClassVar[str] = "unsupported_method"

    attempted: str

    def as_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "attempted": self.attempted}


@dataclass(frozen=True)
class UnsupportedOption(ParseFailure):
    """A flag outside the method's supported set."""

    kind: ClassVar[str] = "unsupported_option"

    method: str
    option: str

    def as_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "method": self.method, "option": self.option}


ClassifyResult: TypeAlias = ParsedCommand | PseudoResult | ParseFailure
