"""Decode raw terminal input bytes into key presses."""

from __future__ import annotations

from typing import Optional

from .events import MODIFIER_ALT, MODIFIER_CTRL, MODIFIER_SHIFT, KeyPress

ESC = 0x1B

_NAMED_BYTES: dict[int, str] = {
    0x09: "tab",
    0x0A: "enter",
    0x0D: "enter",
    0x08: "backspace",
    0x7F: "backspace",
}

_CSI_KEYS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
}


def decode_key(data: bytes) -> Optional[KeyPress]:
    """Decode the first key press in ``data``.

    Returns ``None`` for empty or unrecognized input.
    """
    key, _ = split_key(data)
    return key


def split_key(data: bytes) -> tuple[Optional[KeyPress], int]:
    """Decode the first key press in ``data`` and report how many bytes it used.

    Unrecognized input still consumes at least one byte, so a caller that
    keeps slicing ``data`` always makes progress. Only empty input returns
    ``(None, 0)``.
    """
    if not data:
        return None, 0

    first = data[0]
    if first == ESC:
        return _split_escape(data[1:])

    if first in _NAMED_BYTES:
        return KeyPress(_NAMED_BYTES[first]), 1

    if 0x01 <= first <= 0x1A:
        return KeyPress(chr(first + 0x60), frozenset({MODIFIER_CTRL})), 1

    length = _utf8_length(first)
    if length == 0:
        return None, 1
    try:
        text = data[:length].decode("utf-8")
    except UnicodeDecodeError:
        return None, min(length, len(data))
    return _decode_char(text), length


def _split_escape(rest: bytes) -> tuple[Optional[KeyPress], int]:
    if not rest:
        return KeyPress("esc"), 1

    if rest[:1] == b"O" and len(rest) >= 2:
        return _named_csi(rest[1:2]), 3

    if rest[:1] == b"[" and len(rest) >= 2:
        # Parameter and intermediate bytes run up to a single final byte.
        end = 1
        while end < len(rest) and 0x20 <= rest[end] <= 0x3F:
            end += 1
        if end == len(rest):
            return None, 1 + len(rest)
        if end > 1:
            return None, 2 + end
        return _named_csi(rest[1:2]), 3

    key, used = split_key(rest)
    if key is None:
        return None, 1 + used
    return KeyPress(key.code, key.modifiers | {MODIFIER_ALT}), 1 + used


def _named_csi(final: bytes) -> Optional[KeyPress]:
    name = _CSI_KEYS.get(final.decode("ascii", errors="replace"))
    if name is None:
        return None
    return KeyPress(name)


def _utf8_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _decode_char(char: str) -> Optional[KeyPress]:
    if not char.isprintable():
        return None
    if char.isalpha() and char.isupper():
        return KeyPress(char, frozenset({MODIFIER_SHIFT}))
    return KeyPress(char)
