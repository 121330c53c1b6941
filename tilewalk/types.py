# tilewalk/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, TypeAlias

Scalar: TypeAlias = float

Rect = Tuple[float, float, float, float]  # x, y, w, h

GridPos = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Vector2:
    x: Scalar
    y: Scalar

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, (int, float)):
            raise TypeError(
                f"scalar must be int or float, not {type(scalar).__name__}"
            )
        if scalar == 0:
            raise ValueError(scalar)
        return Vector2(self.x / scalar, self.y / scalar)

    def __getitem__(self, index: int) -> Scalar:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError(index)

    def with_x(self, x: Scalar) -> Vector2:
        return Vector2(x, self.y)

    def with_y(self, y: Scalar) -> Vector2:
        return Vector2(self.x, y)
