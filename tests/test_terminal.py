"""
Tests for TerminalSession against a stand-in blessed Terminal.
"""
from contextlib import contextmanager

import pytest
from terminal import TerminalSession


class StubTerminal:
    home = "<home>"
    clear = "<clear>"

    def __init__(self, keys=()):
        self.keys = list(keys)
        self.events = []

    def _mode(self, name):
        @contextmanager
        def mode():
            self.events.append(f"enter {name}")
            try:
                yield
            finally:
                self.events.append(f"exit {name}")
        return mode()

    def fullscreen(self):
        return self._mode("fullscreen")

    def cbreak(self):
        return self._mode("cbreak")

    def hidden_cursor(self):
        return self._mode("hidden_cursor")

    def inkey(self, timeout=None):
        return self.keys.pop(0) if self.keys else ""


class TestTerminalSession:
    """Scoped acquisition and key primitives."""

    def test_released_on_exit(self):
        term = StubTerminal()
        with TerminalSession(term):
            assert term.events == ["enter fullscreen"]
        assert term.events == ["enter fullscreen", "exit fullscreen"]

    def test_released_on_error(self):
        term = StubTerminal()
        with pytest.raises(RuntimeError):
            with TerminalSession(term):
                raise RuntimeError("boom")
        assert term.events[-1] == "exit fullscreen"

    def test_read_key_uses_cbreak(self):
        term = StubTerminal(keys=["7"])
        assert TerminalSession(term).read_key() == "7"
        assert term.events == ["enter cbreak", "exit cbreak"]

    def test_poll_key(self):
        term = StubTerminal(keys=["", "x"])
        session = TerminalSession(term)
        assert session.poll_key(0.01) is False
        assert session.poll_key(0.01) is True

    def test_clear(self, capsys):
        TerminalSession(StubTerminal()).clear()
        assert capsys.readouterr().out == "<home><clear>"
