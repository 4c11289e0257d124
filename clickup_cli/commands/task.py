"""Task commands - get, create, update, complete, delete and search tasks."""

from __future__ import annotations

from typing import Any

from rich.markup import escape
from rich.prompt import Confirm, Prompt

from clickup_cli.commands.base import GroupCommand, as_list, require_numeric
from clickup_cli.ui.console import console, print_json, print_success, print_warning
from clickup_cli.ui.panels import create_task_panel, create_tasks_table, task_status
from clickup_cli.ui.spinners import create_spinner

COMPLETE_STATUS = "complete"


def parse_priority(value: Any) -> int:
    """ClickUp priorities run from 1 (urgent) to 4 (low)."""
    try:
        priority = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid priority: {value!r} (expected 1-4)")
    if not 1 <= priority <= 4:
        raise ValueError(f"Invalid priority: {priority} (expected 1-4)")
    return priority


def _text_flag(flags: dict[str, Any], *names: str) -> str | None:
    for name in names:
        value = flags.get(name)
        if isinstance(value, list):
            value = value[-1]
        if value is not None:
            return str(value)
    return None


class TaskCommand(GroupCommand):
    """Work with individual tasks."""

    name = "task"
    description = "Get, create, update, complete, delete and search tasks"
    usage = "task <get|create|update|complete|delete|search> <id> [options] [--json]"
    aliases = ["tasks", "t"]

    subcommands = {
        "get": "get",
        "show": "get",
        "create": "create",
        "new": "create",
        "update": "update",
        "edit": "update",
        "complete": "complete",
        "done": "complete",
        "delete": "delete",
        "rm": "delete",
        "search": "search",
        "find": "search",
    }

    def _task_id(self, args: list[str]) -> str:
        if not args:
            raise ValueError("A task ID is required")
        return args[0]

    def _updates_from_flags(self, flags: dict[str, Any]) -> dict[str, Any]:
        updates: dict[str, Any] = {}
        name = _text_flag(flags, "name", "n")
        description = _text_flag(flags, "description", "d")
        status = _text_flag(flags, "status", "s")
        priority = _text_flag(flags, "priority", "p")

        if name:
            updates["name"] = name
        if description:
            updates["description"] = description
        if status:
            updates["status"] = status
        if priority:
            updates["priority"] = parse_priority(priority)
        return updates

    def get(self, args: list[str], flags: dict[str, Any]) -> bool:
        task_id = self._task_id(args)

        with create_spinner(f"Fetching task {task_id}...", style="loading"):
            with self.make_client() as client:
                task = client.get_task(task_id)

        if flags.get("json") or flags.get("j"):
            print_json(task)
        else:
            console.print()
            console.print(create_task_panel(task))
        return True

    def create(self, args: list[str], flags: dict[str, Any]) -> bool:
        """Create a task in the list given as the first argument."""
        if not args:
            raise ValueError("A list ID is required")
        list_id = require_numeric(args[0], "list ID")

        payload = self._updates_from_flags(flags)
        # Without --name the task is created interactively
        if not payload.get("name"):
            name = Prompt.ask(
                "[primary]❯[/primary] [text]Task name[/text]",
                console=console,
            ).strip()
            if not name:
                raise ValueError("Task name is required")
            payload["name"] = name

            if not payload.get("description"):
                description = Prompt.ask(
                    "[primary]❯[/primary] [text]Task description (optional)[/text]",
                    console=console,
                    default="",
                    show_default=False,
                ).strip()
                if description:
                    payload["description"] = description

        with create_spinner("Creating task...", style="saving"):
            with self.make_client() as client:
                task = client.create_task(list_id, payload)

        if flags.get("json") or flags.get("j"):
            print_json(task)
        else:
            print_success(f"Task created: {task.get('name')}\nID: {task.get('id')}")
        return True

    def update(self, args: list[str], flags: dict[str, Any]) -> bool:
        task_id = self._task_id(args)
        updates = self._updates_from_flags(flags)

        if not updates:
            print_warning("No updates specified. Use --name, --description, --status or --priority.")
            return True

        with create_spinner(f"Updating task {task_id}...", style="saving"):
            with self.make_client() as client:
                task = client.update_task(task_id, updates)

        if flags.get("json") or flags.get("j"):
            print_json(task)
        else:
            print_success(f"Task updated: {task.get('name')}\nStatus: {task_status(task)}")
        return True

    def complete(self, args: list[str], flags: dict[str, Any]) -> bool:
        task_id = self._task_id(args)

        with create_spinner(f"Completing task {task_id}...", style="saving"):
            with self.make_client() as client:
                task = client.update_task(task_id, {"status": COMPLETE_STATUS})

        if flags.get("json") or flags.get("j"):
            print_json(task)
        else:
            print_success(f"Task completed: {task.get('name')}")
        return True

    def delete(self, args: list[str], flags: dict[str, Any]) -> bool:
        task_id = self._task_id(args)

        if not (flags.get("force") or flags.get("f")):
            confirmed = Confirm.ask(
                f"[warning]Are you sure you want to delete task {task_id}?[/warning]",
                console=console,
                default=False,
            )
            if not confirmed:
                console.print("[muted]Deletion cancelled[/muted]")
                return True

        with create_spinner(f"Deleting task {task_id}...", style="saving"):
            with self.make_client() as client:
                client.delete_task(task_id)

        print_success(f"Task {task_id} deleted")
        return True

    def search(self, args: list[str], flags: dict[str, Any]) -> bool:
        """Full-text search, narrowed by repeated --space/--project/--list/--status/--assignee."""
        query = " ".join(args).strip()
        if not query:
            raise ValueError("A search query is required")

        assignees = [int(require_numeric(a, "assignee ID")) for a in as_list(flags.get("assignee"))]

        with create_spinner("Searching tasks...", style="loading"):
            with self.make_client() as client:
                tasks = client.search_tasks(
                    query,
                    space_ids=as_list(flags.get("space")) or None,
                    project_ids=as_list(flags.get("project")) or None,
                    list_ids=as_list(flags.get("list")) or None,
                    statuses=as_list(flags.get("status")) or None,
                    assignees=assignees or None,
                )

        if flags.get("json") or flags.get("j"):
            print_json(tasks)
        elif not tasks:
            print_warning("No tasks found")
        else:
            console.print()
            console.print(create_tasks_table(tasks, title=f"Results for {escape(query)!r}"))
        return True
