import pytest

from core.domain.errors import NoClipboardToolFoundError, ToolNotFoundError
from core.domain.models import ClipboardPreference, Invocation, InvocationMode
from core.services.dispatcher import dispatch


class TestDispatch:
    def test_print_writes_path_and_newline(self, settings, console, make_system):
        system = make_system()
        code = dispatch(
            Invocation(mode=InvocationMode.PRINT, raw_path="x"),
            "/home/user/[file]",
            system=system,
            console=console,
            settings=settings,
        )
        assert code == 0
        assert console.file.getvalue() == "/home/user/[file]\n"
        assert system.probed == []
        assert system.spawned == []

    def test_open_spawns_opener_detached(self, settings, console, make_system):
        system = make_system()
        code = dispatch(
            Invocation(raw_path="x"),
            "/home/user/.local/share/Steam",
            system=system,
            console=console,
            settings=settings,
        )
        assert code == 0
        assert system.spawned == [("xdg-open", "/home/user/.local/share/Steam")]
        assert console.file.getvalue() == (
            "Opening default file browser at: /home/user/.local/share/Steam\n"
        )

    def test_open_uses_configured_opener(self, settings, console, make_system):
        system = make_system()
        custom = settings.model_copy(update={"opener_command": "open"})
        dispatch(Invocation(raw_path="x"), "/tmp", system=system, console=console, settings=custom)
        assert system.spawned == [("open", "/tmp")]

    def test_clipboard_auto(self, settings, console, make_system):
        system = make_system(available=["xclip"])
        code = dispatch(
            Invocation(mode=InvocationMode.CLIPBOARD, raw_path="x"),
            "/home/user/file",
            system=system,
            console=console,
            settings=settings,
        )
        assert code == 0
        assert system.piped == [(("xclip", "-selection", "clipboard"), "/home/user/file")]
        assert console.file.getvalue() == "Path copied to clipboard (using xclip).\n"

    def test_clipboard_forced_missing_propagates(self, settings, console, make_system):
        invocation = Invocation(
            mode=InvocationMode.CLIPBOARD,
            clipboard_preference=ClipboardPreference.WL_COPY,
            raw_path="x",
        )
        with pytest.raises(ToolNotFoundError):
            dispatch(invocation, "/x", system=make_system(), console=console, settings=settings)
        assert console.file.getvalue() == ""

    def test_clipboard_none_available_propagates(self, settings, console, make_system):
        invocation = Invocation(mode=InvocationMode.CLIPBOARD, raw_path="x")
        with pytest.raises(NoClipboardToolFoundError):
            dispatch(invocation, "/x", system=make_system(), console=console, settings=settings)

    def test_print_keeps_path_verbatim(self, settings, console, make_system):
        path = "/home/a\tb/:smile: [bold]x[/bold]  "
        dispatch(
            Invocation(mode=InvocationMode.PRINT, raw_path="x"),
            path,
            system=make_system(),
            console=console,
            settings=settings,
        )
        assert console.file.getvalue() == path + "\n"

    def test_open_confirmation_keeps_tabs(self, settings, console, make_system):
        dispatch(Invocation(raw_path="x"), "/tmp/a\tb", system=make_system(), console=console, settings=settings)
        assert console.file.getvalue() == "Opening default file browser at: /tmp/a\tb\n"
