# frames.py

from errors import EmptyAnimation, IndexOutOfRange, InvalidSpeed

DEFAULT_SPEED = 500  # milliseconds between frames
MAX_SPEED = 3_600_000  # one hour


class Frame:
    def __init__(self, content=None):
        self.content = list(content) if content else []

    @classmethod
    def from_text(cls, text):
        return cls(text.split("\n"))

    def add_line(self, text):
        self.content.append(text)

    def line(self, index):
        self._check_line(index)
        return self.content[index]

    def set_line(self, index, text):
        self._check_line(index)
        self.content[index] = text

    def delete_line(self, index):
        self._check_line(index)
        return self.content.pop(index)

    def _check_line(self, index):
        if not 0 <= index < len(self.content):
            raise IndexOutOfRange(
                f"Line {index} out of range (frame has {len(self.content)} lines)."
            )

    def __len__(self):
        return len(self.content)

    def __eq__(self, other):
        if not isinstance(other, Frame):
            return NotImplemented
        return self.content == other.content

    def __repr__(self):
        return f"Frame({self.content!r})"

    def __str__(self):
        return "\n".join(self.content)


class Animation:
    """
    Ordered frames, a playback cursor and the delay between frames.

    The cursor is a plain index: inserting or moving frames does not shift
    it, so after those calls it may point at a different frame than before.
    Deleting clamps it back into range.
    """

    def __init__(self, speed=DEFAULT_SPEED):
        self._frames = []
        self._current_frame = 0
        self._speed = DEFAULT_SPEED
        self.set_speed(speed)

    @classmethod
    def from_state(cls, frames, current_frame, speed):
        """Build without checking invariants; call validate() afterwards."""
        animation = cls()
        animation._frames = list(frames)
        animation._current_frame = current_frame
        animation._speed = speed
        return animation

    @property
    def frames(self):
        return tuple(self._frames)

    @property
    def frame_count(self):
        return len(self._frames)

    @property
    def current_frame(self):
        return self._current_frame

    @property
    def speed(self):
        return self._speed

    def __len__(self):
        return len(self._frames)

    def add_frame(self, frame):
        self._check_type(frame)
        self._frames.append(frame)

    def insert_frame(self, index, frame):
        self._check_type(frame)
        if not 0 <= index <= len(self._frames):
            raise IndexOutOfRange(
                f"Cannot insert at {index}: valid positions are 0..{len(self._frames)}."
            )
        self._frames.insert(index, frame)

    def delete_frame(self, index):
        """Remove a frame, keeping at least one. Returns it, or None if kept."""
        self._check_index(index)
        if len(self._frames) <= 1:
            return None
        removed = self._frames.pop(index)
        self._current_frame = min(self._current_frame, len(self._frames) - 1)
        return removed

    def move_frame(self, src, dst):
        self._check_index(src)
        self._check_index(dst)
        frame = self._frames.pop(src)
        self._frames.insert(dst, frame)

    def current(self):
        if not self._frames:
            raise EmptyAnimation("Animation has no frames.")
        self._check_index(self._current_frame, what="Cursor")
        return self._frames[self._current_frame]

    def next_frame(self):
        frame = self.current()
        self._current_frame = (self._current_frame + 1) % len(self._frames)
        return frame

    def previous_frame(self):
        """Step the cursor back one frame, wrapping, and return that frame."""
        self.current()
        self._current_frame = (self._current_frame - 1) % len(self._frames)
        return self._frames[self._current_frame]

    def reset(self):
        self._current_frame = 0

    def set_speed(self, value):
        # bool is an int subclass, but True ms is not a speed
        if isinstance(value, bool) or not isinstance(value, int) or not 0 < value <= MAX_SPEED:
            raise InvalidSpeed(
                f"Speed must be between 1 and {MAX_SPEED} milliseconds, got {value!r}."
            )
        self._speed = value

    def validate(self):
        if not self._frames:
            raise EmptyAnimation("Animation has no frames.")
        for frame in self._frames:
            self._check_type(frame)
        self._check_index(self._current_frame, what="Cursor")
        self.set_speed(self._speed)

    def _check_index(self, index, what="Frame"):
        if not 0 <= index < len(self._frames):
            raise IndexOutOfRange(
                f"{what} {index} out of range (animation has {len(self._frames)} frames)."
            )

    @staticmethod
    def _check_type(frame):
        if not isinstance(frame, Frame):
            raise TypeError("Only Frame instances allowed.")
