"""Main CLI entry point - one-shot commands and an interactive shell."""

from __future__ import annotations

import argparse
import logging
import shlex
import sys
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.styles import Style
from pydantic import ValidationError
from rich.markup import escape
from rich.text import Text

from clickup_cli import __app_name__, __version__
from clickup_cli.commands.auth import AuthCommand
from clickup_cli.commands.base import BaseCommand, ClientFactory
from clickup_cli.commands.help import HelpCommand
from clickup_cli.commands.lists import ListCommand
from clickup_cli.commands.space import SpaceCommand
from clickup_cli.commands.task import TaskCommand
from clickup_cli.commands.user import UserCommand
from clickup_cli.commands.workspace import WorkspaceCommand
from clickup_cli.core.config import CLISettings, load_settings
from clickup_cli.ui.console import console, print_error, print_info
from clickup_cli.utils.completions import CommandCompleter
from clickup_cli.utils.history import CommandHistory
from clickup_cli.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

COMMAND_CLASSES: list[type[BaseCommand]] = [
    AuthCommand,
    UserCommand,
    TaskCommand,
    ListCommand,
    WorkspaceCommand,
    SpaceCommand,
    HelpCommand,
]

PROMPT_STYLE = Style.from_dict({
    "prompt": "#7B68EE bold",
    "completion-menu": "bg:#1a1625 #e8e8e8",
    "completion-menu.completion": "bg:#1a1625 #c77dff",
    "completion-menu.completion.current": "bg:#7b68ee #ffffff bold",
    "completion-menu.meta.completion": "bg:#1a1625 #888888",
    "completion-menu.meta.completion.current": "bg:#7b68ee #e8e8e8",
})


def build_commands(
    settings: CLISettings,
    token: Optional[str] = None,
    client_factory: Optional[ClientFactory] = None,
) -> dict[str, BaseCommand]:
    """Instantiate every command and index it by name and aliases."""
    commands: dict[str, BaseCommand] = {}
    for command_class in COMMAND_CLASSES:
        command = command_class(settings, token=token, client_factory=client_factory)
        for name in [command.name, *command.aliases]:
            commands[name] = command
    return commands


def print_history(history: CommandHistory, limit: int = 10) -> None:
    """Show the most recent shell commands, oldest first."""
    recent = history.get_recent(limit)
    if not recent:
        print_info("No commands in history yet", title="History")
        return
    for index, command in enumerate(recent, 1):
        console.print(f"  [muted]{index:>2}[/muted]  [command]{escape(command)}[/command]")


class ClickUpShell:
    """Interactive shell that dispatches the same commands as one-shot mode."""

    def __init__(self, settings: CLISettings, commands: dict[str, BaseCommand]):
        self.settings = settings
        self.commands = commands
        self.history = CommandHistory(settings.history_file)
        self.session = PromptSession(
            history=self.history.history,
            completer=CommandCompleter(),
            style=PROMPT_STYLE,
            complete_while_typing=True,
            mouse_support=False,
        )

    def get_prompt(self) -> HTML:
        return HTML("<prompt>clickup ❯</prompt> ")

    def run(self) -> int:
        self._print_banner()

        while True:
            try:
                user_input = self.session.prompt(self.get_prompt()).strip()
                if not user_input:
                    continue

                self.history.add(user_input)

                try:
                    parts = shlex.split(user_input)
                except ValueError as e:
                    print_error(f"Could not parse input: {e}")
                    continue

                cmd_name, args = parts[0].lower(), parts[1:]

                if cmd_name in ["quit", "exit", "q"]:
                    console.print("[muted]Goodbye.[/muted]")
                    return 0

                if cmd_name in ["clear", "cls"]:
                    console.clear()
                    continue

                if cmd_name == "history":
                    print_history(self.history)
                    console.print()
                    continue

                if cmd_name in self.commands:
                    try:
                        self.commands[cmd_name].execute(args)
                    except KeyboardInterrupt:
                        console.print("\n[warning]Interrupted[/warning]")
                else:
                    print_error(f"Unknown command: {cmd_name}")
                    console.print("[muted]Type help for available commands[/muted]")

                console.print()

            except KeyboardInterrupt:
                console.print("\n[muted]Type quit to exit[/muted]")
            except EOFError:
                console.print("\n[muted]Goodbye.[/muted]")
                return 0

    def _print_banner(self) -> None:
        banner = Text()
        banner.append(f"{__app_name__} ", style="primary.bold")
        banner.append(f"v{__version__}", style="muted")
        banner.append("\nType ", style="muted")
        banner.append("help", style="command")
        banner.append(" for commands, ", style="muted")
        banner.append("quit", style="command")
        banner.append(" to exit.", style="muted")
        console.print(banner)
        console.print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clickup",
        description="ClickUp CLI - manage your ClickUp workspace from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Run 'clickup help' for the list of commands.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--token",
        default=None,
        help="Access token for this invocation (overrides CLICKUP_API_TOKEN and the stored token)",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="API base URL (default: https://api.clickup.com/api/v2)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log requests to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{__app_name__} {__version__}",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help="Command group to run (starts the interactive shell if omitted)",
    )
    return parser


def run(argv: Optional[list[str]] = None, client_factory: Optional[ClientFactory] = None) -> int:
    """Parse arguments, run one command or the shell, and return the exit code."""
    parser = build_parser()
    # Command-specific flags pass through to the command
    args, remaining = parser.parse_known_args(argv)

    try:
        settings = load_settings(base_url=args.base_url)
    except ValidationError as e:
        print_error(str(e), title="Invalid configuration")
        return 1

    setup_logging("DEBUG" if args.verbose else settings.log_level)
    commands = build_commands(settings, token=args.token, client_factory=client_factory)

    if not args.command:
        if not sys.stdin.isatty():
            parser.print_help()
            return 1
        return ClickUpShell(settings, commands).run()

    cmd_name = args.command.lower()
    if cmd_name not in commands:
        print_error(f"Unknown command: {args.command}")
        console.print("[muted]Run 'clickup help' for available commands[/muted]")
        return 1

    logger.debug("Running %s %s", cmd_name, remaining)
    try:
        success = commands[cmd_name].execute(remaining)
    except KeyboardInterrupt:
        console.print("\n[warning]Interrupted[/warning]")
        return 1
    return 0 if success else 1


def main() -> None:
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
