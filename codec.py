# codec.py

import json

from errors import AnimationError, IOFailure, MalformedData, SchemaMismatch
from frames import Animation, Frame


def serialize(animation):
    data = {
        "frames": [{"content": list(frame.content)} for frame in animation.frames],
        "current_frame": animation.current_frame,
        "speed": animation.speed,
    }
    return json.dumps(data, ensure_ascii=False, separators=(",", ":"))


def deserialize(text):
    """
    Rebuild an Animation from serialize() output.

    Only the shape of the data is checked here. The result may still break
    Animation invariants (no frames, cursor past the end), so callers that
    go on to play it should run validate() first; load_animation() does.
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise MalformedData(f"Not UTF-8 text: {e}") from e
    elif text.startswith("\ufeff"):
        text = text[1:]
    try:
        data = json.loads(text)
    except RecursionError as e:
        raise MalformedData("Not valid JSON: nested too deeply.") from e
    except ValueError as e:
        raise MalformedData(f"Not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise SchemaMismatch("Expected a JSON object at the top level.")

    raw_frames = _require(data, "frames", list)
    frames = []
    for i, raw in enumerate(raw_frames):
        if not isinstance(raw, dict):
            raise SchemaMismatch(f"frames[{i}] must be an object.")
        content = _require(raw, "content", list, where=f"frames[{i}].")
        if not all(isinstance(line, str) for line in content):
            raise SchemaMismatch(f"frames[{i}].content must hold only strings.")
        frames.append(Frame(content))

    current_frame = _require_int(data, "current_frame")
    speed = _require_int(data, "speed")
    return Animation.from_state(frames, current_frame, speed)


def _require(data, key, kind, where=""):
    if key not in data:
        raise SchemaMismatch(f"Missing field '{where}{key}'.")
    value = data[key]
    if not isinstance(value, kind):
        raise SchemaMismatch(
            f"Field '{where}{key}' must be {kind.__name__}, got {type(value).__name__}."
        )
    return value


def _require_int(data, key):
    value = _require(data, key, int)
    if isinstance(value, bool):
        raise SchemaMismatch(f"Field '{key}' must be int, got bool.")
    return value


def save_animation(animation, path):
    text = serialize(animation)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise IOFailure(f"Could not write {path}: {e}") from e


def load_animation(path):
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise IOFailure(f"Could not read {path}: {e}") from e
    try:
        animation = deserialize(raw)
        animation.validate()
    except AnimationError as e:
        raise type(e)(f"{path}: {e}") from e
    return animation
