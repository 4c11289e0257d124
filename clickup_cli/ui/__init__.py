"""UI components for the ClickUp CLI."""

from clickup_cli.ui.console import (
    console,
    print_error,
    print_info,
    print_json,
    print_success,
    print_warning,
)
from clickup_cli.ui.panels import (
    create_lists_table,
    create_spaces_table,
    create_task_panel,
    create_tasks_table,
    create_user_panel,
    create_workspaces_table,
)
from clickup_cli.ui.spinners import create_spinner
from clickup_cli.ui.theme import Theme, get_theme

__all__ = [
    # Theme
    "Theme",
    "get_theme",
    # Console
    "console",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_json",
    # Panels
    "create_task_panel",
    "create_tasks_table",
    "create_lists_table",
    "create_spaces_table",
    "create_workspaces_table",
    "create_user_panel",
    # Spinners
    "create_spinner",
]
