"""Selección de herramienta de portapapeles.

Orden de detección automática: wl-copy (Wayland) y luego xclip (X11).
Un flag que fuerza una herramienta nunca cae en la otra.
"""

from __future__ import annotations

import logging

from core.config import AppSettings
from core.domain.errors import NoClipboardToolFoundError, ToolNotFoundError
from core.domain.models import ClipboardPreference, ClipboardTool
from core.interfaces.system import SystemGateway

logger = logging.getLogger(__name__)


def build_clipboard_tools(settings: AppSettings) -> dict[ClipboardPreference, ClipboardTool]:
    """Known backends keyed by the preference that forces them, in probe order."""

    return {
        ClipboardPreference.WL_COPY: ClipboardTool(
            name="wl-copy",
            argv=(settings.wl_copy_command,),
            flag="-w",
        ),
        ClipboardPreference.XCLIP: ClipboardTool(
            name="xclip",
            argv=(settings.xclip_command, "-selection", settings.xclip_selection),
            flag="-x",
        ),
    }


def resolve_clipboard_tool(
    preference: ClipboardPreference,
    *,
    system: SystemGateway,
    settings: AppSettings,
) -> ClipboardTool:
    tools = build_clipboard_tools(settings)

    if preference is not ClipboardPreference.AUTO:
        tool = tools[preference]
        if not system.is_executable_available(tool.executable):
            raise ToolNotFoundError(tool.name, tool.flag)
        return tool

    for tool in tools.values():
        if system.is_executable_available(tool.executable):
            logger.debug("Auto-detected clipboard tool: %s", tool.name)
            return tool
    raise NoClipboardToolFoundError([tool.name for tool in tools.values()])


def copy_to_clipboard(tool: ClipboardTool, text: str, *, system: SystemGateway) -> None:
    """Feed `text` to `tool` on stdin, without a trailing newline."""

    returncode = system.pipe_to(tool.argv, text)
    if returncode != 0:
        logger.warning("%s exited with status %d", tool.name, returncode)
