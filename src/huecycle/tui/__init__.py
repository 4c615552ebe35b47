"""Textual user interface for huecycle."""

from .app import HueCycleApp

__all__ = ["HueCycleApp"]
