"""
Tests for playback.
"""
import pytest
from animators import LoopAnimator, PLAY_TICKS
from conftest import FakeSession
from errors import EmptyAnimation
from frames import Animation


class TestLoopAnimator:
    """LoopAnimator drives next_frame at the animation's speed."""

    def test_requires_animation(self):
        with pytest.raises(ValueError):
            LoopAnimator(["not", "an", "animation"])

    def test_plays_all_ticks_without_keypress(self, animation):
        session = FakeSession()
        shown = LoopAnimator(animation).animate(session)
        assert shown == PLAY_TICKS
        assert session.poll_timeouts == [0.2] * PLAY_TICKS
        assert animation.current_frame == PLAY_TICKS % 3

    def test_key_stops_playback(self, animation, capsys):
        session = FakeSession(polls=[False, False, True])
        shown = LoopAnimator(animation, ticks=10).animate(session)
        assert shown == 3
        assert animation.current_frame == 0
        out = capsys.readouterr().out
        assert "A1\nA2" in out
        assert "Frame 3/3" in out

    def test_frames_shown_in_cycle(self, animation, capsys):
        animation.next_frame()
        LoopAnimator(animation, ticks=3, clear_screen=False).animate(FakeSession())
        out = capsys.readouterr().out
        assert out.index("B1") < out.index("C1") < out.index("A1")

    def test_clear_screen_flag(self, animation):
        session = FakeSession()
        LoopAnimator(animation, ticks=4, clear_screen=False).animate(session)
        assert session.clears == 0
        LoopAnimator(animation, ticks=4).animate(session)
        assert session.clears == 4

    def test_empty_animation(self):
        with pytest.raises(EmptyAnimation):
            LoopAnimator(Animation()).animate(FakeSession())
