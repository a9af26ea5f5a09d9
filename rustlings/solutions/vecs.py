"""Arrays, lists and doubling their elements."""

from __future__ import annotations

from typing import Iterable


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a list holding the same elements."""
    a = (10, 20, 30, 40)
    v = [10, 20, 30, 40]
    return a, v


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of ``values`` in place and return it."""
    values[:] = [element * 2 for element in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """A new list with every element doubled."""
    return [element * 2 for element in values]