"""CLI Commands for ClickUp."""

from clickup_cli.commands.auth import AuthCommand
from clickup_cli.commands.help import HelpCommand
from clickup_cli.commands.lists import ListCommand
from clickup_cli.commands.space import SpaceCommand
from clickup_cli.commands.task import TaskCommand
from clickup_cli.commands.user import UserCommand
from clickup_cli.commands.workspace import WorkspaceCommand

__all__ = [
    "AuthCommand",
    "UserCommand",
    "TaskCommand",
    "ListCommand",
    "WorkspaceCommand",
    "SpaceCommand",
    "HelpCommand",
]
