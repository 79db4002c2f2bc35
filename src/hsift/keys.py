"""Translate Textual key events into abstract input events."""

from hsift.models import InputEvent

_NAMED_KEYS: dict[str, InputEvent] = {
    "up": InputEvent.move_up(),
    "down": InputEvent.move_down(),
    "enter": InputEvent.confirm(),
    "backspace": InputEvent.delete_last(),
    "ctrl+h": InputEvent.delete_last(),
    "ctrl+a": InputEvent.ignored(),
    "ctrl+e": InputEvent.ignored(),
    "escape": InputEvent.ignored(),
}


def decode_key(key: str, character: str | None) -> InputEvent:
    """Return the input event for a Textual ``Key`` (``key``, ``character``) pair.

    Named keys win over their character so that e.g. Enter (``"\\r"``) is a
    confirm rather than an append.  Anything else with a printable character
    appends it; all remaining keys are ignored.
    """
    event = _NAMED_KEYS.get(key)
    if event is not None:
        return event
    if character and character.isprintable():
        return InputEvent.append(character)
    return InputEvent.ignored()
