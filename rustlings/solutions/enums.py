"""Messages that change a small piece of state."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Echo:
    text: str


@dataclass(frozen=True)
class Move:
    point: Point


@dataclass(frozen=True)
class Quit:
    pass


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """Colour, position and whether a quit was requested."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    has_quit: bool = False

    def change_color(self, color: tuple[int, int, int]) -> None:
        self.color = color

    def quit(self) -> None:
        self.has_quit = True

    def echo(self, s: str) -> None:
        print(s)

    def move_position(self, p: Point) -> None:
        self.position = p

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red, green, blue):
                self.change_color((red, green, blue))
            case Echo(text):
                self.echo(text)
            case Move(point):
                self.move_position(point)
            case Quit():
                self.quit()
            case _:
                raise TypeError(f"not a message: {message!r}")