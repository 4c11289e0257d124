"""Tests for CLI command dispatch, exit codes and output."""

import json
import re

import pytest

from clickup_cli.commands import task as task_command
from clickup_cli.commands.base import BaseCommand
from clickup_cli.commands.task import parse_priority
from clickup_cli.core.credentials import CredentialStore
from clickup_cli.main import build_commands, run

ANSI = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def output_of(capsys) -> str:
    return ANSI.sub("", capsys.readouterr().out)


def json_output(capsys):
    return json.loads(output_of(capsys))


@pytest.fixture
def cli(clean_env, fake_api):
    """Run the CLI against the fake API and return the exit code."""
    def _run(*argv):
        return run(list(argv), client_factory=fake_api.factory)
    return _run


@pytest.fixture
def logged_in(config_dir):
    store = CredentialStore(config_dir)
    store.save({"accessToken": "stored-token"})
    return store


class TestParseFlags:
    """Test the shared flag parser."""

    @pytest.fixture
    def command(self, settings):
        return build_commands(settings)["task"]

    def test_values_and_positionals(self, command):
        flags, remaining = command.parse_flags(["abc", "--name", "New", "-s", "open"])
        assert flags == {"name": "New", "s": "open"}
        assert remaining == ["abc"]

    def test_boolean_flag_does_not_eat_positional(self, command):
        flags, remaining = command.parse_flags(["get", "--json", "abc"])
        assert flags == {"json": True}
        assert remaining == ["get", "abc"]

    def test_repeated_flag_collects_list(self, command):
        flags, _ = command.parse_flags(["--space", "s1", "--space", "s2", "--space=s3"])
        assert flags["space"] == ["s1", "s2", "s3"]

    def test_short_boolean_flags_do_not_eat_positional(self, command):
        flags, remaining = command.parse_flags(["tasks", "-a", "900", "-c"])
        assert flags == {"a": True, "c": True}
        assert remaining == ["tasks", "900"]

    @pytest.mark.parametrize("args", [
        ["update", "abc", "--description"],
        ["update", "abc", "--description", "-draft"],
        ["update", "abc", "-d", "--json"],
    ])
    def test_missing_value_raises(self, command, args):
        with pytest.raises(ValueError, match="needs a value"):
            command.parse_flags(args)

    def test_equals_form_allows_leading_dash(self, command):
        flags, _ = command.parse_flags(["--description=-draft", "-n=-x"])
        assert flags == {"description": "-draft", "n": "-x"}


class TestDispatch:
    """Test top-level command resolution and exit codes."""

    def test_help(self, cli, capsys):
        assert cli("help") == 0
        assert "task" in output_of(capsys)

    def test_help_for_group(self, cli, capsys):
        assert cli("help", "workspace") == 0
        assert "workspace spaces" in output_of(capsys)

    def test_unknown_command(self, cli, capsys):
        assert cli("frobnicate") == 1
        assert "Unknown command" in output_of(capsys)

    def test_unknown_subcommand(self, cli, capsys):
        assert cli("task", "explode", "abc") == 1

    def test_missing_subcommand(self, cli):
        assert cli("task") == 1

    def test_aliases_share_instance(self, settings):
        commands = build_commands(settings)
        assert commands["task"] is commands["t"]
        assert all(isinstance(c, BaseCommand) for c in commands.values())


class TestTokenResolution:
    """Test where a command's token comes from."""

    def test_not_authenticated(self, cli, fake_api, capsys):
        assert cli("task", "get", "abc") == 1
        assert "Not authenticated" in output_of(capsys)
        assert fake_api.requests == []

    def test_stored_token(self, cli, fake_api, logged_in, sample_user):
        fake_api.add("GET", "/user", {"user": sample_user})
        assert cli("user", "me", "--json") == 0
        assert fake_api.last_request.headers["Authorization"] == "stored-token"

    def test_environment_beats_stored(self, cli, fake_api, logged_in, monkeypatch, sample_user):
        monkeypatch.setenv("CLICKUP_API_TOKEN", "env-token")
        fake_api.add("GET", "/user", {"user": sample_user})
        assert cli("user", "me") == 0
        assert fake_api.last_request.headers["Authorization"] == "env-token"

    def test_flag_beats_environment(self, cli, fake_api, monkeypatch, sample_user):
        monkeypatch.setenv("CLICKUP_API_TOKEN", "env-token")
        fake_api.add("GET", "/user", {"user": sample_user})
        assert cli("--token", "flag-token", "user", "me") == 0
        assert fake_api.last_request.headers["Authorization"] == "flag-token"


class TestAuth:
    """Test auth login/logout/status."""

    def test_login_stores_token(self, cli, fake_api, config_dir, sample_user, capsys):
        fake_api.add("GET", "/user", {"user": sample_user})
        assert cli("auth", "login", "--token", "pk_new") == 0

        assert CredentialStore(config_dir).get("accessToken") == "pk_new"
        assert "sam" in output_of(capsys)

    def test_login_rejected_token(self, cli, fake_api, config_dir):
        fake_api.add("GET", "/user", {"err": "Token invalid"}, status=401)
        assert cli("auth", "login", "--token", "pk_bad") == 1
        assert CredentialStore(config_dir).get("accessToken") is None

    def test_logout_keeps_defaults(self, cli, logged_in):
        logged_in.set("defaultTeamId", "9001")
        assert cli("auth", "logout") == 0
        assert logged_in.load() == {"defaultTeamId": "9001"}

    def test_logout_all(self, cli, logged_in):
        assert cli("auth", "logout", "--all") == 0
        assert logged_in.load() == {}

    def test_status_without_token(self, cli, capsys):
        assert cli("auth", "status") == 0
        assert "Not authenticated" in output_of(capsys)

    def test_status_expired(self, cli, fake_api, logged_in):
        fake_api.add("GET", "/user", {"err": "Token invalid"}, status=401)
        assert cli("auth", "status") == 1

    def test_status_ok(self, cli, fake_api, logged_in, sample_user, capsys):
        fake_api.add("GET", "/user", {"user": sample_user})
        assert cli("auth", "status") == 0
        assert "sam@example.com" in output_of(capsys)


class TestTaskCommands:
    """Test the task group."""

    def test_get_json(self, cli, fake_api, logged_in, sample_task, capsys):
        fake_api.add("GET", "/task/86abc123", sample_task)
        assert cli("task", "get", "86abc123", "--json") == 0
        assert json_output(capsys) == sample_task

    def test_get_text(self, cli, fake_api, logged_in, sample_task, capsys):
        fake_api.add("GET", "/task/86abc123", sample_task)
        assert cli("task", "get", "86abc123") == 0
        out = output_of(capsys)
        assert "Write release notes" in out
        assert "open" in out
        assert "2026-01-01" in out

    def test_get_not_found(self, cli, fake_api, logged_in, capsys):
        assert cli("task", "get", "missing") == 1
        assert "404" in output_of(capsys)

    def test_get_unauthorized(self, cli, fake_api, logged_in, capsys):
        fake_api.add("GET", "/task/abc", {"err": "Token invalid"}, status=401)
        assert cli("task", "get", "abc") == 1
        assert "401" in output_of(capsys)

    def test_create(self, cli, fake_api, logged_in, capsys):
        created = {"id": "t1", "name": "New Task"}
        fake_api.add("POST", "/list/900/task", created)
        assert cli("task", "create", "900", "--name", "New Task", "--priority", "2", "--json") == 0

        assert json.loads(fake_api.last_request.content) == {"name": "New Task", "priority": 2}
        assert json_output(capsys) == created

    def test_create_interactive(self, cli, fake_api, logged_in, monkeypatch):
        """Without --name, both name and description are asked for."""
        answers = iter(["Plan sprint", "Pick the top five"])
        monkeypatch.setattr(task_command.Prompt, "ask", lambda *args, **kwargs: next(answers))
        fake_api.add("POST", "/list/900/task", {"id": "t2", "name": "Plan sprint"})

        assert cli("task", "create", "900") == 0
        assert json.loads(fake_api.last_request.content) == {
            "name": "Plan sprint",
            "description": "Pick the top five",
        }

    def test_create_interactive_blank_description(self, cli, fake_api, logged_in, monkeypatch):
        answers = iter(["Plan sprint", ""])
        monkeypatch.setattr(task_command.Prompt, "ask", lambda *args, **kwargs: next(answers))
        fake_api.add("POST", "/list/900/task", {"id": "t2", "name": "Plan sprint"})

        assert cli("task", "create", "900") == 0
        assert json.loads(fake_api.last_request.content) == {"name": "Plan sprint"}

    def test_create_with_name_does_not_prompt(self, cli, fake_api, logged_in, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("unexpected prompt")

        monkeypatch.setattr(task_command.Prompt, "ask", fail)
        fake_api.add("POST", "/list/900/task", {"id": "t1", "name": "New Task"})
        assert cli("task", "create", "900", "--name", "New Task") == 0

    def test_create_rejects_non_numeric_list(self, cli, fake_api, logged_in, capsys):
        assert cli("task", "create", "backlog", "--name", "x") == 1
        assert "Invalid list ID" in output_of(capsys)
        assert fake_api.requests == []

    def test_update(self, cli, fake_api, logged_in):
        fake_api.add("PUT", "/task/abc", {"id": "abc", "name": "Renamed", "status": {"status": "review"}})
        assert cli("task", "update", "abc", "--name", "Renamed", "--status", "review") == 0
        assert json.loads(fake_api.last_request.content) == {"name": "Renamed", "status": "review"}

    def test_update_without_changes(self, cli, fake_api, logged_in, capsys):
        assert cli("task", "update", "abc") == 0
        assert "No updates specified" in output_of(capsys)
        assert fake_api.requests == []

    def test_update_value_missing(self, cli, fake_api, logged_in, capsys):
        """A value-taking flag without a value fails instead of being dropped."""
        assert cli("task", "update", "abc", "--description", "-draft") == 1
        assert "needs a value" in output_of(capsys)
        assert fake_api.requests == []

    def test_update_dash_value(self, cli, fake_api, logged_in):
        fake_api.add("PUT", "/task/abc", {"id": "abc", "name": "Task"})
        assert cli("task", "update", "abc", "--description=-draft") == 0
        assert json.loads(fake_api.last_request.content) == {"description": "-draft"}

    def test_update_invalid_priority(self, cli, fake_api, logged_in):
        assert cli("task", "update", "abc", "--priority", "9") == 1
        assert fake_api.requests == []

    def test_complete(self, cli, fake_api, logged_in):
        fake_api.add("PUT", "/task/abc", {"id": "abc", "name": "Done"})
        assert cli("task", "complete", "abc") == 0
        assert json.loads(fake_api.last_request.content) == {"status": "complete"}

    def test_delete_force(self, cli, fake_api, logged_in):
        fake_api.add("DELETE", "/task/abc", None, status=204)
        assert cli("task", "delete", "abc", "--force") == 0
        assert fake_api.last_request.method == "DELETE"

    def test_search(self, cli, fake_api, logged_in, capsys):
        tasks = [{"id": "1", "name": "Found"}]
        fake_api.add("GET", "/search/tasks", {"tasks": tasks})
        assert cli(
            "task", "search", "release notes",
            "--space", "s1", "--space", "s2", "--assignee", "7", "--json",
        ) == 0

        params = fake_api.last_request.url.params
        assert params["query"] == "release notes"
        assert params.get_list("space_ids[]") == ["s1", "s2"]
        assert params.get_list("assignees[]") == ["7"]
        assert json_output(capsys) == tasks


class TestListSpaceWorkspace:
    """Test the list, space and workspace groups."""

    def test_list_tasks_params_and_filter(self, cli, fake_api, logged_in, capsys):
        tasks = [
            {"id": "1", "name": "A", "status": {"status": "open"}},
            {"id": "2", "name": "B", "status": {"status": "closed"}},
        ]
        fake_api.add("GET", "/list/900/task", {"tasks": tasks})
        assert cli("list", "tasks", "900", "--status", "open", "--json") == 0

        params = fake_api.last_request.url.params
        assert params["archived"] == "false"
        assert params["include_closed"] == "false"
        assert params["page"] == "0"
        assert params["order_by"] == "created"
        assert params["reverse"] == "true"
        assert params["subtasks"] == "true"
        assert [t["id"] for t in json_output(capsys)] == ["1"]

    def test_list_tasks_short_flags(self, cli, fake_api, logged_in):
        fake_api.add("GET", "/list/900/task", {"tasks": []})
        assert cli("list", "tasks", "900", "-a", "-c", "-p", "2", "--json") == 0

        params = fake_api.last_request.url.params
        assert params["archived"] == "true"
        assert params["include_closed"] == "true"
        assert params["page"] == "2"

    def test_list_tasks_flag_before_id(self, cli, fake_api, logged_in):
        fake_api.add("GET", "/list/900/task", {"tasks": []})
        assert cli("list", "tasks", "-a", "900", "--json") == 0
        assert fake_api.last_request.url.params["archived"] == "true"

    def test_list_tasks_several_statuses(self, cli, fake_api, logged_in, capsys):
        tasks = [
            {"id": "1", "name": "A", "status": {"status": "open"}},
            {"id": "2", "name": "B", "status": {"status": "Review"}},
            {"id": "3", "name": "C", "status": {"status": "closed"}},
        ]
        fake_api.add("GET", "/list/900/task", {"tasks": tasks})
        assert cli("list", "tasks", "900", "-s", "open", "--status", "review", "--json") == 0
        assert [t["id"] for t in json_output(capsys)] == ["1", "2"]

    def test_list_tasks_negative_page(self, cli, fake_api, logged_in, capsys):
        assert cli("list", "tasks", "900", "--page=-1") == 1
        assert "Invalid page" in output_of(capsys)
        assert fake_api.requests == []

    def test_list_tasks_non_numeric(self, cli, fake_api, logged_in, capsys):
        assert cli("list", "tasks", "abc") == 1
        assert "Invalid list ID" in output_of(capsys)
        assert fake_api.requests == []

    def test_list_tasks_empty(self, cli, fake_api, logged_in, capsys):
        fake_api.add("GET", "/list/900/task", {"tasks": []})
        assert cli("list", "tasks", "900") == 0
        assert "No tasks found" in output_of(capsys)

    def test_workspace_list(self, cli, fake_api, logged_in, capsys):
        fake_api.add("GET", "/team", {"teams": [{"id": "9001", "name": "Acme", "members": []}]})
        assert cli("workspace", "list") == 0
        assert "Acme" in output_of(capsys)

    def test_workspace_spaces_uses_default(self, cli, fake_api, logged_in, capsys):
        spaces = [{"id": "42", "name": "Engineering", "private": False}]
        fake_api.add("GET", "/team/9001/space", {"spaces": spaces})

        assert cli("workspace", "use", "9001") == 0
        assert logged_in.get("defaultTeamId") == "9001"
        capsys.readouterr()

        assert cli("workspace", "spaces", "--json") == 0
        assert json_output(capsys) == spaces

    def test_space_lists_requires_id(self, cli, fake_api, logged_in, capsys):
        assert cli("space", "lists") == 1
        assert "space ID is required" in output_of(capsys)

    def test_space_lists(self, cli, fake_api, logged_in, capsys):
        lists = [{"id": "900", "name": "Backlog", "task_count": 3}]
        fake_api.add("GET", "/space/42/list", {"lists": lists})
        assert cli("space", "lists", "42", "--archived") == 0

        assert fake_api.last_request.url.params["archived"] == "true"
        assert "Backlog" in output_of(capsys)

    def test_space_lists_short_archived(self, cli, fake_api, logged_in):
        fake_api.add("GET", "/space/42/list", {"lists": []})
        assert cli("space", "lists", "-a", "42") == 0
        assert fake_api.last_request.url.params["archived"] == "true"


class TestParsePriority:
    @pytest.mark.parametrize("value", ["1", "4", 2])
    def test_valid(self, value):
        assert parse_priority(value) == int(value)

    @pytest.mark.parametrize("value", ["0", "5", "high", None])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_priority(value)
