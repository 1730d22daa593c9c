"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- El resultado del parseo es un valor inmutable (`frozen`) que se construye una
  sola vez y se pasa al dispatcher; no hay flags globales mutables.
- Los `Field` documentan el contrato sin acoplar el Core a la CLI.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class InvocationMode(str, Enum):
    """What to do with the converted path."""

    PRINT = "print"
    CLIPBOARD = "clipboard"
    OPEN = "open"

    @classmethod
    def default(cls) -> "InvocationMode":
        return cls.OPEN


class ClipboardPreference(str, Enum):
    """Clipboard backend selection; only meaningful in clipboard mode."""

    AUTO = "auto"
    WL_COPY = "wl-copy"
    XCLIP = "xclip"


class Invocation(BaseModel):
    """Resultado inmutable del parseo de argumentos."""

    model_config = ConfigDict(frozen=True)

    mode: InvocationMode = Field(
        default=InvocationMode.OPEN,
        description="Acción seleccionada por los flags (por defecto: abrir en el explorador).",
    )
    clipboard_preference: ClipboardPreference = Field(
        default=ClipboardPreference.AUTO,
        description="Herramienta de portapapeles forzada o detección automática.",
    )
    raw_path: str | None = Field(
        default=None,
        description="Primer argumento posicional tras los flags (ruta estilo Windows).",
    )


class ClipboardTool(BaseModel):
    """A clipboard utility invoked by name, fed the path on stdin."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Nombre mostrado al usuario.")
    argv: tuple[str, ...] = Field(..., min_length=1, description="Comando y argumentos fijos.")
    flag: str = Field(..., min_length=2, description="Flag corto que fuerza esta herramienta.")

    @property
    def executable(self) -> str:
        return self.argv[0]
