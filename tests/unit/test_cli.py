"""Tests for the command-line interface."""

import io
import logging
from pathlib import Path

import pytest
import structlog
from rich.console import Console
from typer.testing import CliRunner

from snapkv import __version__
from snapkv.cli import app, execute_command
from snapkv.core.clock import ManualClock
from snapkv.store.core import KeyValueStore


@pytest.fixture
def out() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


def run(store: KeyValueStore, out: Console, *lines: str) -> str:
    for line in lines:
        execute_command(store, out, line)
    return out.file.getvalue()


class TestExecuteCommand:
    """Dispatching shell lines to the store."""

    def test_set_and_get(self, store: KeyValueStore, out: Console):
        output = run(store, out, "set a hello world", "get a")

        assert "Key 'a' set with TTL of 1800 seconds" in output
        assert "hello world" in output
        assert store.get("a") == "hello world"

    def test_setttl_and_expiry(self, store: KeyValueStore, out: Console, clock: ManualClock):
        run(store, out, "setttl x v 5")
        clock.advance(6)

        output = run(store, out, "get x", "get x")

        assert "Key 'x' set with TTL of 5 seconds" in output
        assert output.index("Key expired") < output.index("Key not found")

    def test_setttl_accepts_human_durations(self, store: KeyValueStore, out: Console):
        output = run(store, out, "setttl x v 2m")

        assert "TTL of 120 seconds" in output

    @pytest.mark.parametrize(
        "line,usage",
        [
            ("set a", "set <key> <value>"),
            ("setttl a b", "setttl <key> <value> <ttl>"),
            ("setttl a b soon", "setttl <key> <value> <ttl>"),
            ("get", "get <key>"),
            ("del", "del <key>"),
            ("restore one", "restore <id>"),
            ("restore --1", "restore <id>"),
            ("restore ²", "restore <id>"),
            ("restore 1 2", "restore <id>"),
        ],
    )
    def test_usage_errors_do_not_mutate(self, store: KeyValueStore, out: Console, line, usage):
        output = run(store, out, line)

        assert f"Usage: {usage}" in output
        assert store.entries() == {}
        assert not store.can_undo

    def test_delete_undo_redo(self, store: KeyValueStore, out: Console):
        output = run(store, out, "del a", "set a 1", "del a", "undo", "redo", "redo")

        assert "Key not found." in output
        assert "Key 'a' deleted." in output
        assert "Undo performed." in output
        assert "Redo performed." in output
        assert "Nothing to redo." in output
        assert "a" not in store

    def test_negative_restore_id_is_not_found(self, store: KeyValueStore, out: Console):
        store.snapshot()

        output = run(store, out, "restore -1")

        assert "Snapshot not found!" in output

    def test_nothing_to_undo(self, store: KeyValueStore, out: Console):
        assert "Nothing to undo." in run(store, out, "undo")

    def test_snapshot_restore_and_listing(self, store: KeyValueStore, out: Console):
        output = run(
            store, out,
            "set a 1", "snapshot", "set a 2", "restore 1", "restore 7", "listSnapshots", "printStore",
        )

        assert "Snapshot created with ID: 1" in output
        assert "Snapshot 1 restored successfully." in output
        assert "Snapshot not found!" in output
        assert "Snapshot ID: 1\na: 1" in output
        assert "Current Store:\na: 1" in output

    def test_empty_listings(self, store: KeyValueStore, out: Console):
        output = run(store, out, "listSnapshots", "printStore", "audit")

        assert "(no snapshots)" in output
        assert "(empty)" in output
        assert "(No actions logged yet)" in output

    def test_save_and_load(self, store: KeyValueStore, out: Console, data_file: Path, test_settings):
        run(store, out, "set a 1", f"save {data_file}")

        other = KeyValueStore(test_settings, ManualClock(start=1_700_000_000))
        output = run(other, out, f"load {data_file}", "get a")

        assert f"Database saved to {data_file}" in output
        assert f"Database loaded from {data_file}" in output
        assert other.get("a") == "1"

    def test_load_missing_and_malformed(self, store: KeyValueStore, out: Console, data_file: Path):
        missing = run(store, out, f"load {data_file}")
        data_file.write_text("nonsense", encoding="utf-8")
        malformed = run(store, out, f"load {data_file}")

        assert "No valid previous database found. Starting fresh." in missing
        assert "Failed to load database" in malformed

    def test_save_failure_reported(self, store: KeyValueStore, out: Console, temp_dir: Path):
        output = run(store, out, f"save {temp_dir / 'missing' / 'db.json'}")

        assert "Failed to save database" in output

    def test_audit_lists_descriptions(self, store: KeyValueStore, out: Console):
        output = run(store, out, "set a 1", "audit")

        assert "SET key: a value: 1 ttl: 1800" in output

    def test_values_are_printed_literally(self, store: KeyValueStore, out: Console):
        output = run(store, out, "set a [bold]x[/bold]", "get a")

        assert "[bold]x[/bold]" in output

    def test_help_unknown_blank_and_exit(self, store: KeyValueStore, out: Console):
        assert execute_command(store, out, "") is True
        assert execute_command(store, out, "help") is True
        assert execute_command(store, out, "frobnicate") is True
        assert execute_command(store, out, "exit") is False
        assert execute_command(store, out, "quit") is False

        output = out.file.getvalue()
        assert "setttl <key> <value> <ttl>" in output
        assert "Unknown command" in output


class TestTyperApp:
    """The typer entry points."""

    @pytest.fixture
    def runner(self) -> CliRunner:
        return CliRunner()

    @pytest.fixture(autouse=True)
    def reset_logging(self):
        yield
        structlog.reset_defaults()
        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()

    def test_version(self, runner: CliRunner):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_init_writes_env_file(self, runner: CliRunner, temp_dir: Path):
        result = runner.invoke(app, ["init", str(temp_dir)])

        assert result.exit_code == 0
        assert "SNAPKV_DEFAULT_TTL_SECONDS=1800" in (temp_dir / ".env").read_text()
        assert (temp_dir / "data").is_dir()

    def test_init_refuses_to_overwrite(self, runner: CliRunner, temp_dir: Path):
        (temp_dir / ".env").write_text("KEEP=1\n")

        result = runner.invoke(app, ["init", str(temp_dir)])

        assert "already exists" in result.output
        assert (temp_dir / ".env").read_text() == "KEEP=1\n"

    def test_shell_session(self, runner: CliRunner, temp_dir: Path):
        data_file = temp_dir / "data" / "db.json"
        env = {"SNAPKV_LOG_DIR": str(temp_dir / "logs"), "SNAPKV_LOG_LEVEL": "WARNING"}

        result = runner.invoke(
            app,
            ["shell", "--data-file", str(data_file)],
            input="set a 1\nget a\nsave\nexit\n",
            env=env,
        )

        assert result.exit_code == 0
        assert "Key 'a' set with TTL of 1800 seconds" in result.output
        assert f"Database saved to {data_file}" in result.output
        assert data_file.exists()

    def test_shell_loads_on_start(self, runner: CliRunner, temp_dir: Path):
        data_file = temp_dir / "db.json"
        data_file.write_text(
            '{"store": {"a": {"value": "1", "expire_time": 0}}, "snapshot_id": 0, "snapshots": {}}'
        )
        env = {"SNAPKV_LOG_DIR": str(temp_dir / "logs"), "SNAPKV_LOG_LEVEL": "WARNING"}

        result = runner.invoke(
            app,
            ["shell", "--data-file", str(data_file), "--load"],
            input="get a\n",
            env=env,
        )

        assert result.exit_code == 0
        assert "Database loaded from" in result.output
        assert "> 1" in result.output
