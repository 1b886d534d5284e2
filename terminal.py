# terminal.py

import sys
from contextlib import ExitStack

from blessed import Terminal


class TerminalSession:
    """
    The terminal for the lifetime of the editor.

    Use as a context manager: entering switches to the alternate screen,
    leaving restores it on every exit path, exceptions included. Raw key
    input is only switched on while a key is being read, so line prompts
    in between keep normal echo and editing.
    """

    def __init__(self, terminal=None):
        self.terminal = terminal or Terminal()
        self._stack = None

    def __enter__(self):
        self._stack = ExitStack()
        self._stack.enter_context(self.terminal.fullscreen())
        return self

    def __exit__(self, exc_type, exc, tb):
        stack, self._stack = self._stack, None
        stack.close()
        return False

    def clear(self):
        sys.stdout.write(self.terminal.home + self.terminal.clear)
        sys.stdout.flush()

    def read_key(self):
        with self.terminal.cbreak():
            return str(self.terminal.inkey())

    def poll_key(self, timeout):
        """Wait up to timeout seconds; True if a key was pressed."""
        with self.terminal.cbreak(), self.terminal.hidden_cursor():
            return bool(self.terminal.inkey(timeout=timeout))
