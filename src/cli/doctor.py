"""Doctor command for environment diagnostics."""

from __future__ import annotations

from typing import List

import typer
from rich.console import Console
from rich.table import Table

from adapters.clipboard import build_clipboard_tools, resolve_clipboard_tool
from adapters.system_tools import HostSystem
from cli.ui_components import EXAMPLE_PATH, build_conversion_table, print_error
from core.config import AppSettings, load_settings, write_user_env_vars
from core.domain.errors import WinpathError
from core.domain.models import ClipboardPreference
from core.path_converter import convert_windows_path

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _load_settings_or_exit() -> AppSettings:
    try:
        return load_settings()
    except WinpathError as exc:
        print_error(Console(stderr=True), exc)
        raise typer.Exit(code=exc.exit_code) from exc


def _check_executable(system: HostSystem, name: str) -> tuple[bool, str]:
    location = system.locate(name)
    if location is None:
        return False, "not found on PATH"
    return True, location


@app.command()
def run() -> None:
    """Check which external tools winpath can use."""

    settings = _load_settings_or_exit()
    system = HostSystem()

    table = Table(title="winpath Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    for tool in build_clipboard_tools(settings).values():
        ok, detail = _check_executable(system, tool.executable)
        table.add_row(f"Clipboard ({tool.name})", "OK" if ok else "MISSING", detail)

    ok_open, detail_open = _check_executable(system, settings.opener_command)
    table.add_row(f"Opener ({settings.opener_command})", "OK" if ok_open else "MISSING", detail_open)

    try:
        auto_tool = resolve_clipboard_tool(ClipboardPreference.AUTO, system=system, settings=settings)
        table.add_row("-c picks", "OK", auto_tool.name)
    except WinpathError as exc:
        table.add_row("-c picks", "FAIL", exc.message)

    table.add_row("Sample conversion", "OK", convert_windows_path(EXAMPLE_PATH))

    _console.print(table)

    if not ok_open:
        _console.print(
            "\n[yellow]Note:[/yellow] Without an opener, the default action prints a message but opens nothing."
        )


@app.command()
def convert(paths: List[str] = typer.Argument(..., help="Windows-style paths to convert.")) -> None:
    """Show how each path would be converted (no external tools are used)."""

    rows = [(raw, convert_windows_path(raw)) for raw in paths]
    _console.print(build_conversion_table(rows))


@app.command(name="setup-tools")
def setup_tools() -> None:
    """Interactive tool setup (stores command names in the user config .env)."""

    settings = _load_settings_or_exit()

    wl_copy = typer.prompt("wl-copy command", default=settings.wl_copy_command, show_default=True).strip()
    xclip = typer.prompt("xclip command", default=settings.xclip_command, show_default=True).strip()
    opener = typer.prompt("Opener command", default=settings.opener_command, show_default=True).strip()

    env_path = write_user_env_vars(
        {
            "WINPATH_WL_COPY_COMMAND": wl_copy,
            "WINPATH_XCLIP_COMMAND": xclip,
            "WINPATH_OPENER_COMMAND": opener,
        }
    )

    _console.print(f"[green]Saved tool config to:[/green] {env_path}")
