"""Application-level exception types for gitdemo."""

from __future__ import annotations


class GitDemoError(Exception):
    """Base exception for gitdemo."""


class ConfigurationError(GitDemoError):
    """Base exception for inconsistent command tables."""


class OptionTableMissingError(ConfigurationError):
    """Raised when a method has no entry in the supported-option table."""

    def __init__(self, method: str) -> None:
        super().__init__(f"No option map for {method}")
        self.method = method
