"""Two dimensional coordinate value type.

``Vector2`` doubles as a pixel / view-space vector, an integer world cell
coordinate and an integer chunk coordinate. Callers pick the unit; the type
itself only does arithmetic. Every operation returns a new instance.
"""

import math
from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass(frozen=True)
class Vector2:
    """Immutable ``(x, y)`` pair.

    Attributes:
        x: Horizontal component (grows to the right).
        y: Vertical component (grows downward).
    """

    x: Number
    y: Number

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def multiply_scalar(self, factor: Number) -> "Vector2":
        return Vector2(self.x * factor, self.y * factor)

    def divide_scalar(self, divisor: Number) -> "Vector2":
        """Component-wise division with IEEE semantics for a zero divisor."""
        if divisor == 0:
            return Vector2(_div_by_zero(self.x), _div_by_zero(self.y))
        return Vector2(self.x / divisor, self.y / divisor)

    def floor(self) -> "Vector2":
        return Vector2(math.floor(self.x), math.floor(self.y))

    def ceil(self) -> "Vector2":
        return Vector2(math.ceil(self.x), math.ceil(self.y))

    def equals(self, other: "Vector2") -> bool:
        return self.x == other.x and self.y == other.y

    def clone(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def _div_by_zero(value: Number) -> float:
    if value == 0 or math.isnan(value):
        return math.nan
    return math.copysign(math.inf, value)
