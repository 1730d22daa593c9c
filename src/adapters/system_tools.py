"""Implementación real de `SystemGateway` (PATH + subprocess).

Por qué un wrapper:
- Estandariza cómo se redirigen stdin/stdout/stderr de las herramientas externas.
- Facilita testeo: el Core recibe el gateway inyectado y se puede sustituir por un fake.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Sequence

logger = logging.getLogger(__name__)


class HostSystem:
    """`SystemGateway` backed by `shutil.which` and `subprocess`."""

    def locate(self, name: str) -> str | None:
        """Full path of `name` on PATH, or None."""

        return shutil.which(name)

    def is_executable_available(self, name: str) -> bool:
        return self.locate(name) is not None

    def pipe_to(self, argv: Sequence[str], text: str) -> int:
        # wl-copy/xclip fork a process that keeps serving the selection and
        # inherits stdout; capturing it would block until the selection changes.
        completed = subprocess.run(
            list(argv),
            input=text,
            text=True,
            stdout=subprocess.DEVNULL,
            check=False,
        )
        return completed.returncode

    def spawn_detached(self, argv: Sequence[str]) -> None:
        try:
            subprocess.Popen(
                list(argv),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as exc:
            # Fire-and-forget: the outcome of the launch is never reported.
            logger.debug("Detached launch of %s failed: %s", argv[0], exc)
