"""Terminal styling and the warning and success messages shown to the learner."""

from __future__ import annotations

import os

_RESET = "\x1b[0m"
_BOLD = "1"
_RED = "31"
_GREEN = "32"
_BLUE = "34"


def _style(code: str, text: object) -> str:
    return f"\x1b[{code}m{text}{_RESET}"


def no_emoji() -> bool:
    """Whether the NO_EMOJI environment variable asks for plain symbols."""
    return "NO_EMOJI" in os.environ


def bold(text: object) -> str:
    """Render ``text`` in bold."""
    return _style(_BOLD, text)


def red(text: object) -> str:
    """Render ``text`` in red."""
    return _style(_RED, text)


def green(text: object) -> str:
    """Render ``text`` in green."""
    return _style(_GREEN, text)


def blue(text: object) -> str:
    """Render ``text`` in blue."""
    return _style(_BLUE, text)


def warn(message: str) -> str:
    """Print a red warning line and return it."""
    symbol = "!" if no_emoji() else "⚠️ "
    line = f"{red(symbol)} {red(message)}"
    print(line)
    return line


def success(message: str) -> str:
    """Print a green success line and return it."""
    symbol = "✓" if no_emoji() else "✅"
    line = f"{green(symbol)} {green(message)}"
    print(line)
    return line