"""Cons lists, clone-on-write sequences and sums shared between threads."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Iterator, Sequence


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of a cons list."""

    value: int
    rest: Cons | Nil

    def __iter__(self) -> Iterator[int]:
        node: Cons | Nil = self
        while isinstance(node, Cons):
            yield node.value
            node = node.rest


def create_empty_list() -> Nil:
    """A cons list with no items."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A cons list holding a single item."""
    return Cons(1, Nil())


class Cow:
    """A sequence that is borrowed until it first needs to change, then copied."""

    def __init__(self, data: Sequence[int], owned: bool = False) -> None:
        self._data = data
        self._owned = owned

    @property
    def data(self) -> Sequence[int]:
        return self._data

    def to_mut(self) -> list[int]:
        """A mutable list of the values, copying borrowed data first."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data  # type: ignore[return-value]

    def is_owned(self) -> bool:
        """Whether the values belong to this object rather than being borrowed."""
        return self._owned

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"Cow.{kind}({list(self._data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying borrowed data only if something changes."""
    for index, value in enumerate(list(cow)):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum, in one thread per offset, the numbers whose remainder by ``workers`` is that offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)
    sums = [0] * workers

    def work(offset: int) -> None:
        total = sum(n for n in shared if n % workers == offset)
        print(f"Sum of offset {offset} is {total}")
        sums[offset] = total

    threads = [threading.Thread(target=work, args=(offset,)) for offset in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return sums