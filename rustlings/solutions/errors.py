"""Error handling: nametags, token costs and positive non-zero integers."""

from __future__ import annotations

from dataclasses import dataclass

_DIGITS = frozenset("0123456789")
_I32 = 32
_I64 = 64


class ParseIntError(ValueError):
    """Text could not be read as an integer."""

    _MESSAGES = {
        "empty": "cannot parse integer from empty string",
        "invalid_digit": "invalid digit found in string",
        "pos_overflow": "number too large to fit in target type",
        "neg_overflow": "number too small to fit in target type",
    }

    def __init__(self, kind: str) -> None:
        if kind not in self._MESSAGES:
            raise ValueError(f"unknown parse error kind {kind!r}")
        super().__init__(self._MESSAGES[kind])
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ParseIntError) and other.kind == self.kind

    def __hash__(self) -> int:
        return hash(self.kind)


def _parse_signed(text: str, bits: int) -> int:
    if not text:
        raise ParseIntError("empty")
    sign, digits = 1, text
    if text[0] in "+-":
        sign = -1 if text[0] == "-" else 1
        digits = text[1:]
    if not digits or not set(digits) <= _DIGITS:
        raise ParseIntError("invalid_digit")
    value = sign * int(digits)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ParseIntError("pos_overflow")
    if value < -limit:
        raise ParseIntError("neg_overflow")
    return value


def parse_int(text: str) -> int:
    """Read a signed 64-bit integer, raising ParseIntError on bad input."""
    return _parse_signed(text, _I64)


def generate_nametag_text(name: str) -> str:
    """Text for a nametag; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Token cost of buying the typed-in quantity of items."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_signed(item_quantity, _I32)
    return qty * cost_per_item + processing_fee


class CreationError(ValueError):
    """A value was not positive and non-zero."""

    _MESSAGES = {"negative": "number is negative", "zero": "number is zero"}

    def __init__(self, kind: str) -> None:
        if kind not in self._MESSAGES:
            raise ValueError(f"unknown creation error kind {kind!r}")
        super().__init__(self._MESSAGES[kind])
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CreationError) and other.kind == self.kind

    def __hash__(self) -> int:
        return hash(self.kind)


class ParsePosNonzeroError(ValueError):
    """Parsing a positive non-zero integer failed; ``cause`` says why."""

    def __init__(self, cause: CreationError | ParseIntError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ParsePosNonzeroError) and other.cause == self.cause

    def __hash__(self) -> int:
        return hash(self.cause)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    @classmethod
    def new(cls, value: int) -> PositiveNonzeroInteger:
        if value < 0:
            raise CreationError("negative")
        if value == 0:
            raise CreationError("zero")
        return cls(value)


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Read a positive non-zero integer from text."""
    try:
        value = parse_int(s)
    except ParseIntError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger.new(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err