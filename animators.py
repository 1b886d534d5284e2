# animators.py

from colorama import init, Fore

from errors import EmptyAnimation
from frames import Animation

init(autoreset=True)

PLAY_TICKS = 50


class BaseAnimator:
    def __init__(self, animation, ticks=PLAY_TICKS, clear_screen=True):
        if not isinstance(animation, Animation):
            raise ValueError("Must pass an Animation.")
        self.animation = animation
        self.ticks = ticks
        self.clear_screen = clear_screen

    def _clear_console(self, session):
        if self.clear_screen:
            session.clear()

    def animate(self, session):
        raise NotImplementedError("Implement in subclasses.")


class LoopAnimator(BaseAnimator):
    """Cycles through the frames at the animation's speed until a key is hit."""

    def animate(self, session):
        if len(self.animation) == 0:
            raise EmptyAnimation("No frames to animate.")
        delay = self.animation.speed / 1000
        shown = 0
        for _ in range(self.ticks):
            index = self.animation.current_frame
            frame = self.animation.next_frame()
            self._clear_console(session)
            print(Fore.CYAN + f"Frame {index + 1}/{len(self.animation)}"
                  + Fore.YELLOW + f"  ({self.animation.speed}ms, any key stops)\n")
            print(Fore.GREEN + str(frame))
            shown += 1
            if session.poll_key(delay):
                break
        return shown
