"""Errores del dominio.

Todos son terminales: se propagan hasta la CLI, que los muestra en una línea y
los traduce al código de salida.
"""

from __future__ import annotations

from typing import Sequence


class WinpathError(Exception):
    """Base error; `exit_code` is what the process exits with."""

    exit_code: int = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingArgumentError(WinpathError):
    def __init__(self) -> None:
        super().__init__("A Windows path argument is required.")


class ToolNotFoundError(WinpathError):
    """A clipboard tool was forced with a flag but is not on PATH."""

    def __init__(self, tool: str, flag: str) -> None:
        super().__init__(f"The '{flag}' flag was used, but {tool} was not found.")
        self.tool = tool
        self.flag = flag


class NoClipboardToolFoundError(WinpathError):
    def __init__(self, tools: Sequence[str]) -> None:
        self.tools = tuple(tools)
        names = " nor ".join(self.tools)
        prefix = "Neither " if len(self.tools) > 1 else "No "
        super().__init__(f"{prefix}{names} was found. Please install a clipboard utility.")


class InvalidConfigurationError(WinpathError):
    """A `WINPATH_*` variable (environment or user .env) failed validation."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid configuration: WINPATH_{field.upper()}: {reason}")
        self.field = field
        self.reason = reason
