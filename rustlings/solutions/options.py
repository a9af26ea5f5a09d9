"""How much ice cream is left at a given hour."""

from __future__ import annotations


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces left at ``time_of_day`` (24-hour clock), or None for a bad hour."""
    if time_of_day < 0:
        raise ValueError("time_of_day must not be negative")
    if time_of_day > 24:
        return None
    if time_of_day >= 22:
        return 0
    return 5