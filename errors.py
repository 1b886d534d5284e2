# errors.py


class AnimationError(Exception):
    """Base class for everything the animation core raises."""


class IndexOutOfRange(AnimationError, IndexError):
    pass


class EmptyAnimation(AnimationError):
    pass


class InvalidSpeed(AnimationError, ValueError):
    pass


class MalformedData(AnimationError, ValueError):
    """Saved data is not valid UTF-8 / JSON."""


class SchemaMismatch(AnimationError, ValueError):
    """Saved data parsed, but a field is missing or has the wrong shape."""


class IOFailure(AnimationError, OSError):
    pass
