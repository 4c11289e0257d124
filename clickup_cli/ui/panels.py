"""Panel and table builders for ClickUp entities."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def format_due_date(value: Any) -> Optional[str]:
    """Format a ClickUp timestamp (milliseconds since epoch, often a string)."""
    if value in (None, ""):
        return None
    try:
        millis = int(value)
    except (TypeError, ValueError):
        return str(value)
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc).strftime("%Y-%m-%d")


def task_status(task: dict[str, Any]) -> str:
    status = task.get("status") or {}
    if isinstance(status, dict):
        return status.get("status") or "No status"
    return str(status)


def task_priority(task: dict[str, Any]) -> Optional[str]:
    priority = task.get("priority")
    if isinstance(priority, dict):
        return priority.get("priority")
    return priority


def assignee_names(task: dict[str, Any]) -> list[str]:
    names = []
    for assignee in task.get("assignees") or []:
        name = assignee.get("username") or assignee.get("email")
        if name:
            names.append(name)
    return names


def _priority_text(priority: Optional[str]) -> Text:
    if not priority:
        return Text("Not set", style="muted")
    style = f"priority.{priority.lower()}" if priority.lower() in {"urgent", "high", "normal", "low"} else "text"
    return Text(priority, style=style)


def create_task_panel(task: dict[str, Any]) -> Panel:
    """Create a details panel for a single task."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field", style="muted", width=12)
    table.add_column("Value", style="text")

    table.add_row("ID", Text(str(task.get("id", "?")), style="id"))
    table.add_row("Status", Text(task_status(task), style="status"))
    table.add_row("Priority", _priority_text(task_priority(task)))

    names = assignee_names(task)
    if names:
        table.add_row("Assignees", Text(", ".join(names), style="user"))

    due = format_due_date(task.get("due_date"))
    if due:
        table.add_row("Due", Text(due, style="number"))

    task_list = task.get("list") or {}
    if task_list.get("id"):
        table.add_row("List", f"{task_list.get('name', '')} ({task_list['id']})".strip())

    if task.get("url"):
        table.add_row("URL", Text(task["url"], style="url"))

    description = task.get("description") or task.get("text_content")
    if description:
        table.add_row("", "")
        table.add_row("Description", description)

    return Panel(
        table,
        title=f"[primary]{task.get('name', 'Task')}[/primary]",
        border_style="primary",
        padding=(1, 2),
    )


def create_tasks_table(tasks: list[dict[str, Any]], title: str = "Tasks") -> Table:
    table = Table(
        title=f"[primary]{title} ({len(tasks)})[/primary]",
        show_header=True,
        header_style="primary",
        border_style="muted",
    )
    table.add_column("#", style="muted", justify="right")
    table.add_column("ID", style="id", no_wrap=True)
    table.add_column("Name", style="name")
    table.add_column("Status", style="status")
    table.add_column("Priority")
    table.add_column("Assignees", style="user")

    for index, task in enumerate(tasks, 1):
        table.add_row(
            str(index),
            str(task.get("id", "?")),
            task.get("name", ""),
            task_status(task),
            _priority_text(task_priority(task)),
            ", ".join(assignee_names(task)),
        )
    return table


def create_lists_table(lists: list[dict[str, Any]]) -> Table:
    table = Table(
        title=f"[primary]Lists ({len(lists)})[/primary]",
        show_header=True,
        header_style="primary",
        border_style="muted",
    )
    table.add_column("#", style="muted", justify="right")
    table.add_column("ID", style="id", no_wrap=True)
    table.add_column("Name", style="name")
    table.add_column("Tasks", style="number", justify="right")

    for index, item in enumerate(lists, 1):
        table.add_row(
            str(index),
            str(item.get("id", "?")),
            item.get("name", ""),
            str(item.get("task_count") or 0),
        )
    return table


def create_spaces_table(spaces: list[dict[str, Any]]) -> Table:
    table = Table(
        title=f"[primary]Spaces ({len(spaces)})[/primary]",
        show_header=True,
        header_style="primary",
        border_style="muted",
    )
    table.add_column("#", style="muted", justify="right")
    table.add_column("ID", style="id", no_wrap=True)
    table.add_column("Name", style="name")
    table.add_column("Visibility", style="muted")

    for index, space in enumerate(spaces, 1):
        table.add_row(
            str(index),
            str(space.get("id", "?")),
            space.get("name", ""),
            "Private" if space.get("private") else "Public",
        )
    return table


def create_workspaces_table(workspaces: list[dict[str, Any]]) -> Table:
    table = Table(
        title=f"[primary]Workspaces ({len(workspaces)})[/primary]",
        show_header=True,
        header_style="primary",
        border_style="muted",
    )
    table.add_column("#", style="muted", justify="right")
    table.add_column("ID", style="id", no_wrap=True)
    table.add_column("Name", style="name")
    table.add_column("Members", style="number", justify="right")

    for index, team in enumerate(workspaces, 1):
        table.add_row(
            str(index),
            str(team.get("id", "?")),
            team.get("name", ""),
            str(len(team.get("members") or [])),
        )
    return table


def create_user_panel(user: dict[str, Any]) -> Panel:
    text = Text()
    text.append("Username: ", style="muted")
    text.append(str(user.get("username", "?")), style="user")
    text.append("\n")
    text.append("Email:    ", style="muted")
    text.append(str(user.get("email", "?")), style="text")
    text.append("\n")
    text.append("ID:       ", style="muted")
    text.append(str(user.get("id", "?")), style="id")

    return Panel(
        text,
        title="[primary]Current User[/primary]",
        border_style="primary",
        padding=(1, 2),
    )
