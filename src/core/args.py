"""Parseo de argumentos de la CLI.

Por qué no argparse/typer:
- El contrato es "consumir flags desde el frente hasta el primer token que no
  empiece por `-`, o hasta `--`", ignorando en silencio los flags desconocidos.
  click se come el `--` y rechaza opciones desconocidas, así que `-- -o` no
  llegaría como ruta literal.
"""

from __future__ import annotations

import logging
from typing import Sequence

from core.domain.errors import MissingArgumentError
from core.domain.models import ClipboardPreference, Invocation, InvocationMode

logger = logging.getLogger(__name__)

END_OF_FLAGS = "--"

# flag -> (mode, clipboard preference or None when the flag does not touch it)
FLAG_EFFECTS: dict[str, tuple[InvocationMode, ClipboardPreference | None]] = {
    "-o": (InvocationMode.PRINT, None),
    "--output": (InvocationMode.PRINT, None),
    "-d": (InvocationMode.PRINT, None),
    "--dry-run": (InvocationMode.PRINT, None),
    "-c": (InvocationMode.CLIPBOARD, ClipboardPreference.AUTO),
    "--clipboard": (InvocationMode.CLIPBOARD, ClipboardPreference.AUTO),
    "-w": (InvocationMode.CLIPBOARD, ClipboardPreference.WL_COPY),
    "--wl-copy": (InvocationMode.CLIPBOARD, ClipboardPreference.WL_COPY),
    "-x": (InvocationMode.CLIPBOARD, ClipboardPreference.XCLIP),
    "--xclip": (InvocationMode.CLIPBOARD, ClipboardPreference.XCLIP),
}


def parse_invocation(argv: Sequence[str]) -> Invocation:
    """Build an `Invocation` from raw arguments (without the program name).

    The rightmost flag wins for both the mode and the clipboard preference.
    Unknown `-`-prefixed tokens are consumed and ignored.
    """

    mode = InvocationMode.default()
    preference = ClipboardPreference.AUTO

    index = 0
    while index < len(argv) and argv[index].startswith("-") and argv[index] != END_OF_FLAGS:
        token = argv[index]
        effect = FLAG_EFFECTS.get(token)
        if effect is None:
            logger.debug("Ignoring unknown flag %r", token)
        else:
            mode, flag_preference = effect
            if flag_preference is not None:
                preference = flag_preference
        index += 1

    if index < len(argv) and argv[index] == END_OF_FLAGS:
        index += 1

    raw_path = argv[index] if index < len(argv) else None
    invocation = Invocation(mode=mode, clipboard_preference=preference, raw_path=raw_path)
    logger.debug("Parsed invocation: %s", invocation)
    return invocation


def require_path(invocation: Invocation) -> str:
    """Return the raw path or raise `MissingArgumentError` when absent/empty."""

    if not invocation.raw_path:
        raise MissingArgumentError()
    return invocation.raw_path
