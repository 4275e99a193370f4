# src/plaintask/utils/text.py

"""Terminal text helpers: padding and ANSI effects."""

from __future__ import annotations

from enum import Enum


class TextEffect(Enum):
    STRIKE_THROUGH = "9"
    RED = "31"
    GREEN = "32"

    @property
    def ansi_code(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


def right_pad(text: str, width: int, fill: str = " ") -> str:
    """Pad `text` on the right up to `width` characters (never truncates)."""
    if len(fill) != 1:
        raise ValueError("fill must be a single character")
    return text.ljust(width, fill)


def add_text_effect(text: str, effect: TextEffect) -> str:
    return f"\x1b[{effect.ansi_code}m{text}\x1b[0m"
