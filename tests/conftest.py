"""
Shared fixtures: a scripted terminal session and scripted line input.
"""
import pytest
from frames import Animation, Frame
from prompts import LineInput


class FakeSession:
    """Stands in for TerminalSession without touching the real terminal."""

    def __init__(self, keys=(), polls=()):
        self.keys = list(keys)
        self.polls = list(polls)
        self.clears = 0
        self.poll_timeouts = []

    def clear(self):
        self.clears += 1

    def read_key(self):
        return self.keys.pop(0) if self.keys else "q"

    def poll_key(self, timeout):
        self.poll_timeouts.append(timeout)
        return self.polls.pop(0) if self.polls else False


def scripted_input(lines):
    remaining = list(lines)

    def fake_input(prompt=""):
        return remaining.pop(0) if remaining else ""

    return LineInput(input_func=fake_input)


@pytest.fixture
def animation():
    anim = Animation(speed=200)
    anim.add_frame(Frame(["A1", "A2"]))
    anim.add_frame(Frame(["B1"]))
    anim.add_frame(Frame(["C1"]))
    return anim
