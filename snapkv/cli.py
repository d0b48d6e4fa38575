"""Command-line interface for SnapKV."""

import sys
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape

from .config.logging import cli_logger as logger
from .config.logging import setup_logging
from .config.settings import Settings
from .core.exceptions import (
    ConfigurationError,
    KeyExpiredError,
    KeyNotFoundError,
    PersistenceError,
    SnapKVError,
)
from .store.core import KeyValueStore
from .utils.date_utils import parse_ttl

app = typer.Typer(
    name="snapkv",
    help="SnapKV - in-memory key-value store with TTLs, undo/redo and snapshots",
    add_completion=False,
)
console = Console()

HELP_TEXT = """Available commands:
 set <key> <value>
 setttl <key> <value> <ttl>
 get <key>
 del <key>
 undo
 redo
 snapshot
 restore <id>
 save [filename]
 load [filename]
 listSnapshots
 printStore
 audit
 help
 exit"""


def _usage(out: Console, text: str) -> None:
    out.print(f"[yellow]Usage: {escape(text)}[/yellow]")


def _print_pairs(out: Console, pairs: List[tuple]) -> None:
    for key, value in pairs:
        out.print(f"{escape(key)}: {escape(value)}")


def _load_into(store: KeyValueStore, out: Console, source: str) -> None:
    try:
        loaded = store.load(source)
    except PersistenceError as e:
        out.print(f"[red]Failed to load database: {escape(str(e))}[/red]")
        return
    if loaded:
        out.print(f"Database loaded from {escape(source)}")
    else:
        out.print("No valid previous database found. Starting fresh.")


def execute_command(store: KeyValueStore, out: Console, line: str) -> bool:
    """Run one shell command against ``store``.

    Returns ``False`` when the shell should stop.
    """
    parts = line.split()
    if not parts:
        return True
    command, args = parts[0], parts[1:]

    if command in ("exit", "quit"):
        return False

    if command == "set":
        if len(args) < 2:
            _usage(out, "set <key> <value>")
            return True
        key, value = args[0], " ".join(args[1:])
        store.set(key, value)
        out.print(f"Key '{escape(key)}' set with TTL of {store.settings.DEFAULT_TTL_SECONDS} seconds")

    elif command == "setttl":
        if len(args) < 3:
            _usage(out, "setttl <key> <value> <ttl>")
            return True
        try:
            ttl = parse_ttl(args[-1])
        except ValueError:
            _usage(out, "setttl <key> <value> <ttl>")
            return True
        key, value = args[0], " ".join(args[1:-1])
        store.set(key, value, ttl)
        out.print(f"Key '{escape(key)}' set with TTL of {ttl} seconds")

    elif command == "get":
        if len(args) != 1:
            _usage(out, "get <key>")
            return True
        try:
            out.print(escape(store.get(args[0])))
        except KeyExpiredError:
            out.print("Key expired")
        except KeyNotFoundError:
            out.print("Key not found")

    elif command == "del":
        if len(args) != 1:
            _usage(out, "del <key>")
            return True
        if store.delete(args[0]):
            out.print(f"Key '{escape(args[0])}' deleted.")
        else:
            out.print("Key not found.")

    elif command == "undo":
        out.print("Undo performed." if store.undo() else "Nothing to undo.")

    elif command == "redo":
        out.print("Redo performed." if store.redo() else "Nothing to redo.")

    elif command == "snapshot":
        out.print(f"Snapshot created with ID: {store.snapshot()}")

    elif command == "restore":
        if len(args) != 1:
            _usage(out, "restore <id>")
            return True
        try:
            snapshot_id = int(args[0])
        except ValueError:
            _usage(out, "restore <id>")
            return True
        if store.restore(snapshot_id):
            out.print(f"Snapshot {snapshot_id} restored successfully.")
        else:
            out.print("[red]Snapshot not found![/red]")

    elif command == "save":
        try:
            path = store.save(args[0] if args else None)
        except PersistenceError as e:
            out.print(f"[red]Failed to save database: {escape(str(e))}[/red]")
        else:
            out.print(f"Database saved to {escape(str(path))}")

    elif command == "load":
        _load_into(store, out, args[0] if args else str(store.settings.DATA_FILE))

    elif command == "listSnapshots":
        out.print("\nAvailable Snapshots:")
        snapshots = store.list_snapshots()
        if not snapshots:
            out.print("(no snapshots)")
        for snapshot in snapshots:
            out.print(f"Snapshot ID: {snapshot.id}")
            _print_pairs(out, snapshot.items())

    elif command == "printStore":
        out.print("\nCurrent Store:")
        pairs = store.items()
        if not pairs:
            out.print("(empty)")
        _print_pairs(out, pairs)

    elif command == "audit":
        out.print("\nAudit Log:")
        entries = store.audit_log()
        if not entries:
            out.print("(No actions logged yet)")
        for entry in entries:
            out.print(escape(str(entry)))

    elif command == "help":
        out.print(HELP_TEXT, markup=False)

    else:
        out.print("Unknown command")

    return True


def _load_settings() -> Settings:
    try:
        return Settings()
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


@app.command("shell")
def run_shell(
    data_file: Optional[Path] = typer.Option(
        None, "--data-file", "-f", help="Default file for save/load"
    ),
    load: bool = typer.Option(False, "--load/--no-load", help="Load the data file on start"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Start an interactive SnapKV session."""
    try:
        settings = _load_settings()
    except ConfigurationError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    if data_file is not None:
        settings.DATA_FILE = data_file
    if debug:
        settings.DEBUG = True
        settings.LOG_LEVEL = "DEBUG"

    settings.create_directories()
    setup_logging(settings)

    store = KeyValueStore(settings)
    if load:
        _load_into(store, console, str(settings.DATA_FILE))

    console.print("Welcome to SnapKV. Type 'help' for commands or 'exit' to quit.")
    while True:
        try:
            line = console.input("> ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        try:
            if not execute_command(store, console, line):
                break
        except SnapKVError as e:
            logger.warning("Command failed", command=line, error=e.message)
            console.print(f"[red]{escape(str(e))}[/red]")


@app.command("init")
def init_project(
    directory: Path = typer.Argument(Path("."), help="Directory to initialize"),
    force: bool = typer.Option(False, "--force", help="Overwrite existing files"),
) -> None:
    """Write a starter configuration file."""
    directory = directory.resolve()
    directory.mkdir(parents=True, exist_ok=True)

    config_file = directory / ".env"
    data_dir = directory / "data"

    if config_file.exists() and not force:
        console.print(f"[yellow]Configuration file already exists: {config_file}[/yellow]")
        console.print("Use --force to overwrite")
        return

    data_dir.mkdir(exist_ok=True)

    config_content = """# SnapKV Configuration
SNAPKV_DEBUG=false
SNAPKV_LOG_LEVEL=INFO
SNAPKV_LOG_DIR=./logs

# Store settings
SNAPKV_DEFAULT_TTL_SECONDS=1800

# Persistence
SNAPKV_DATA_FILE=./data/snapkv.json
SNAPKV_JSON_INDENT=4
"""

    config_file.write_text(config_content)
    console.print(f"[green]Initialized SnapKV project in {directory}[/green]")
    console.print(f"Configuration file: {config_file}")
    console.print(f"Data directory: {data_dir}")


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"SnapKV version {__version__}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
