"""A wrapper that can hold a value of any type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Wrapper(Generic[T]):
    """Holds one value."""

    value: T