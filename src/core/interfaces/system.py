"""Contrato con el sistema anfitrión.

Por qué Protocol:
- El dispatcher solo necesita tres capacidades: saber si un ejecutable está en
  el PATH, pasarle texto por stdin y lanzar un proceso desacoplado.
- Los tests inyectan un fake que registra qué se lanzó sin abrir nada.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class SystemGateway(Protocol):
    def is_executable_available(self, name: str) -> bool:
        """True si `name` se encuentra en el PATH de búsqueda."""

        ...

    def pipe_to(self, argv: Sequence[str], text: str) -> int:
        """Ejecuta `argv` con `text` en stdin (sin salto final) y devuelve el exit code."""

        ...

    def spawn_detached(self, argv: Sequence[str]) -> None:
        """Lanza `argv` en segundo plano sin esperar ni observar el resultado."""

        ...
