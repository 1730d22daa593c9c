"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/mensajes entre `winpath` y `winpath-doctor`.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.errors import WinpathError

EXAMPLE_PATH = r"Z:\home\youruser\.local\share\Steam"

USAGE_FLAGS: tuple[tuple[str, str], ...] = (
    ("-o, --output", "Prints the path to stdout."),
    ("-c, --clipboard", "Copies the path to the clipboard."),
    ("-d, --dry-run", "Prints the path to stdout (same as -o)."),
    ("-w, --wl-copy", "Forces wl-copy for the clipboard."),
    ("-x, --xclip", "Forces xclip for the clipboard."),
    ("(Default)", "Opens the path in the default file browser."),
)


def print_usage(console: Console, prog: str) -> None:
    """Imprime el mensaje de uso con todos los flags y un ejemplo."""

    text = Text()
    text.append(f"Usage: {prog} [-o | -c | -d | -w | -x] [--] <windows_path>\n")
    for flags, effect in USAGE_FLAGS:
        text.append(f"  {flags:<17}{effect}\n")
    text.append("\n")
    text.append(f"Example: {prog} '{EXAMPLE_PATH}'")
    console.print(text, soft_wrap=True)


def print_error(console: Console, error: WinpathError) -> None:
    """One-line error report."""

    console.print(Text.assemble(("Error: ", "bold red"), error.message), soft_wrap=True)


def build_conversion_table(rows: Iterable[tuple[str, str]]) -> Table:
    table = Table(title="Path conversion")
    table.add_column("Windows path", style="cyan", no_wrap=True)
    table.add_column("Host path", style="green", no_wrap=True)
    for raw, converted in rows:
        table.add_row(Text(raw), Text(converted))
    return table
