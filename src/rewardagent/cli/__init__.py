"""Command-line interface for the reward agent."""

from .main import app, main

__all__ = ["app", "main"]
