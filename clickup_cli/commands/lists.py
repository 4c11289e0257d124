"""List command - show the tasks in a list."""

from __future__ import annotations

from typing import Any

from clickup_cli.commands.base import GroupCommand, as_list, require_numeric
from clickup_cli.ui.console import console, print_json, print_warning
from clickup_cli.ui.panels import create_tasks_table, task_status
from clickup_cli.ui.spinners import create_spinner


class ListCommand(GroupCommand):
    """Operations on a single list."""

    name = "list"
    description = "Show the tasks in a list"
    usage = "list tasks <list_id> [-a|--archived] [-c|--closed] [-p|--page N] [-s|--status S] [--json]"
    aliases = []

    subcommands = {
        "tasks": "tasks",
    }

    def tasks(self, args: list[str], flags: dict[str, Any]) -> bool:
        if not args:
            raise ValueError("A list ID is required")
        list_id = require_numeric(args[0], "list ID")

        page = flags.get("page") or flags.get("p") or 0
        try:
            page = int(page)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid page: {page!r}")
        if page < 0:
            raise ValueError(f"Invalid page: {page} (pages start at 0)")

        with create_spinner(f"Fetching tasks for list {list_id}...", style="loading"):
            with self.make_client() as client:
                tasks = client.get_tasks(
                    list_id,
                    archived=bool(flags.get("archived") or flags.get("a")),
                    include_closed=bool(flags.get("closed") or flags.get("c")),
                    page=page,
                    order_by="created",
                    reverse=True,
                    subtasks=True,
                )

        # Repeating --status keeps tasks in any of the given statuses
        statuses = {s.lower() for s in as_list(flags.get("status")) + as_list(flags.get("s"))}
        if statuses:
            tasks = [t for t in tasks if task_status(t).lower() in statuses]

        if flags.get("json") or flags.get("j"):
            print_json(tasks)
        elif not tasks:
            print_warning("No tasks found")
        else:
            console.print()
            console.print(create_tasks_table(tasks, title=f"Tasks in list {list_id}"))
        return True
