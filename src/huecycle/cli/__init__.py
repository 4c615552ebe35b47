"""Command-line interface for huecycle."""

from .main import cli

__all__ = ["cli"]
