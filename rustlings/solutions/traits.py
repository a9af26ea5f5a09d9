"""Shared behaviour: appending "Bar", licensing information and combined traits."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value: object) -> object:
    """``value`` with "Bar" appended to it."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Anything that can describe its licence."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two pieces of software carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    def some_function(self) -> bool:
        return True


class OtherTrait:
    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    pass


class OtherStruct(SomeTrait, OtherTrait):
    pass


def some_func(item: SomeTrait) -> bool:
    """Whether both trait functions of ``item`` report true."""
    if not isinstance(item, SomeTrait) or not isinstance(item, OtherTrait):
        raise TypeError(f"{type(item).__name__} lacks SomeTrait or OtherTrait")
    return item.some_function() and item.other_function()