"""CLI package for gitdemo."""

from .app import app

__all__ = ["app"]
