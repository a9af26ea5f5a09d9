"""Small string functions."""

from __future__ import annotations

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def current_favorite_color() -> str:
    """The favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Whether ``attempt`` is one of the known colour words."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """``text`` without surrounding whitespace."""
    return text.strip()


def compose_me(text: str) -> str:
    """``text`` followed by " world!"."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """``text`` with every "cars" replaced by "balloons"."""
    return text.replace("cars", "balloons")