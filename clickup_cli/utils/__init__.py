"""Utility functions for the CLI."""

from clickup_cli.utils.completions import CommandCompleter
from clickup_cli.utils.history import CommandHistory
from clickup_cli.utils.logging_config import setup_logging

__all__ = ["CommandCompleter", "CommandHistory", "setup_logging"]
