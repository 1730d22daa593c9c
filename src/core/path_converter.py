"""Conversión de rutas estilo Windows (Wine/Proton) a rutas del host.

Reglas, en este orden:
1. Toda barra invertida pasa a ser `/`.
2. Un prefijo `<letra>:` al inicio se reemplaza por `/` (convención de Wine:
   la unidad mapeada apunta a la raíz del sistema de archivos). No se valida
   qué letra es.
3. Un único `//` inicial se colapsa a `/`. No es recursivo: `///x` queda `//x`.

No hay más normalización (ni `..`, ni barras finales, ni espacios).
La función no es idempotente: volver a convertir su salida puede cambiarla.
"""

from __future__ import annotations

import re

_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:")
_DOUBLE_LEADING_SLASH = re.compile(r"^//")


def convert_windows_path(raw_path: str) -> str:
    """Convierte `raw_path` a la ruta equivalente del host."""

    path = raw_path.replace("\\", "/")
    path = _DRIVE_PREFIX.sub("/", path, count=1)
    return _DOUBLE_LEADING_SLASH.sub("/", path, count=1)
