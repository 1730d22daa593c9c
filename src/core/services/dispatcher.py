"""Despacho de la acción seleccionada sobre la ruta convertida.

The dispatcher owns no I/O of its own: external tools go through the
injected `SystemGateway` and user-facing text through the rich consoles, so
the CLI and the tests wire the same flow with different collaborators.
"""

from __future__ import annotations

import logging

from rich.console import Console

from adapters.clipboard import copy_to_clipboard, resolve_clipboard_tool
from core.config import AppSettings
from core.domain.models import Invocation, InvocationMode
from core.interfaces.system import SystemGateway

logger = logging.getLogger(__name__)


def _write_line(console: Console, line: str) -> None:
    # Bypass rich rendering: tabs, markup and emoji codes stay byte-for-byte.
    console.file.write(line + "\n")
    console.file.flush()


def dispatch(
    invocation: Invocation,
    converted_path: str,
    *,
    system: SystemGateway,
    console: Console,
    settings: AppSettings,
) -> int:
    """Run the action for `invocation.mode` and return the exit status.

    Errors (`ToolNotFoundError`, `NoClipboardToolFoundError`) propagate to the
    caller, which reports them.
    """

    if invocation.mode is InvocationMode.PRINT:
        _write_line(console, converted_path)
        return 0

    if invocation.mode is InvocationMode.CLIPBOARD:
        tool = resolve_clipboard_tool(
            invocation.clipboard_preference,
            system=system,
            settings=settings,
        )
        copy_to_clipboard(tool, converted_path, system=system)
        _write_line(console, f"Path copied to clipboard (using {tool.name}).")
        return 0

    argv = (settings.opener_command, converted_path)
    logger.debug("Launching %s", argv)
    system.spawn_detached(argv)
    _write_line(console, f"Opening default file browser at: {converted_path}")
    return 0
