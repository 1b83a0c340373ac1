"""Coordinates, sizes and colours used when drawing images."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class Dims:
    """A width and a height in pixels."""

    width: float
    height: float


@dataclass(frozen=True)
class Coord:
    """A point; x grows to the right and y grows downwards."""

    x: float
    y: float

    def __add__(self, dims: Dims) -> Coord:
        if not isinstance(dims, Dims):
            return NotImplemented
        return Coord(self.x + dims.width, self.y + dims.height)


@dataclass(frozen=True)
class Color:
    """An ARGB colour with one byte per channel."""

    alpha: int
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in fields(self):
            value = getattr(self, channel.name)
            if not 0 <= value <= 255:
                raise ValueError(f"{channel.name} must be between 0 and 255, got {value}")

    def dim(self) -> Color:
        """Return the same colour with a third of its opacity."""
        return Color(self.alpha // 3, self.red, self.green, self.blue)