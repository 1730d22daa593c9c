import io
from collections.abc import Sequence

import pytest
from rich.console import Console

from core.config import AppSettings

SETTING_NAMES = ("WL_COPY_COMMAND", "XCLIP_COMMAND", "XCLIP_SELECTION", "OPENER_COMMAND", "LOG_LEVEL")


class FakeSystem:
    """Records probes, piped input and detached launches instead of running anything."""

    def __init__(self, available: Sequence[str] = (), pipe_returncode: int = 0):
        self.available = set(available)
        self.pipe_returncode = pipe_returncode
        self.probed: list[str] = []
        self.piped: list[tuple[tuple[str, ...], str]] = []
        self.spawned: list[tuple[str, ...]] = []

    def is_executable_available(self, name: str) -> bool:
        self.probed.append(name)
        return name in self.available

    def pipe_to(self, argv: Sequence[str], text: str) -> int:
        self.piped.append((tuple(argv), text))
        return self.pipe_returncode

    def spawn_detached(self, argv: Sequence[str]) -> None:
        self.spawned.append(tuple(argv))


def make_console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def clean_env(monkeypatch):
    for name in SETTING_NAMES:
        monkeypatch.delenv(f"WINPATH_{name}", raising=False)
    return monkeypatch


@pytest.fixture
def settings(clean_env):
    return AppSettings(_env_file=None)


@pytest.fixture
def console():
    return make_console()


@pytest.fixture
def err_console():
    return make_console()


@pytest.fixture
def make_system():
    return FakeSystem
