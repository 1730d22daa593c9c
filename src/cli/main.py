"""Entry point de la CLI `winpath`.

Convierte una ruta estilo Windows (Wine/Proton) a la ruta del host y la
imprime, la copia al portapapeles o la abre en el explorador de archivos.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.logging import RichHandler

from adapters.system_tools import HostSystem
from cli.ui_components import print_error, print_usage
from core.args import parse_invocation, require_path
from core.config import AppSettings, load_settings
from core.domain.errors import MissingArgumentError, WinpathError
from core.interfaces.system import SystemGateway
from core.path_converter import convert_windows_path
from core.services.dispatcher import dispatch


def configure_logging(settings: AppSettings, console: Console) -> None:
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    prog: str = "winpath",
    system: SystemGateway | None = None,
    settings: AppSettings | None = None,
    console: Console | None = None,
    err_console: Console | None = None,
) -> int:
    """Run one invocation and return the process exit status."""

    argv = list(sys.argv[1:] if argv is None else argv)
    system = system or HostSystem()
    console = console or Console()
    err_console = err_console or Console(stderr=True)

    try:
        settings = settings or load_settings()
        invocation = parse_invocation(argv)
        raw_path = require_path(invocation)
        converted = convert_windows_path(raw_path)
        return dispatch(
            invocation,
            converted,
            system=system,
            console=console,
            settings=settings,
        )
    except MissingArgumentError as exc:
        print_usage(console, prog)
        return exc.exit_code
    except WinpathError as exc:
        print_error(err_console, exc)
        return exc.exit_code


def run() -> None:
    """Console-script entry point."""

    err_console = Console(stderr=True)
    try:
        settings = load_settings()
    except WinpathError as exc:
        print_error(err_console, exc)
        sys.exit(exc.exit_code)
    configure_logging(settings, err_console)
    prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "winpath"
    sys.exit(main(prog=prog, settings=settings, err_console=err_console))
