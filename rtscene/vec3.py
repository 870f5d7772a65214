"""Three-component vector used for points, directions and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


def _fdiv(a: float, b: float) -> float:
    """Divide like IEEE floats do, giving inf or nan instead of raising."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector.

    Arithmetic with another Vec3 is component-wise; arithmetic with a
    number applies the number to every component.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3 | Number) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Vec3 | Number) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __mul__(self, other: Vec3 | Number) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: Vec3 | Number) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(
                _fdiv(self.x, other.x),
                _fdiv(self.y, other.y),
                _fdiv(self.z, other.z),
            )
        if isinstance(other, (int, float)):
            return Vec3(
                _fdiv(self.x, other), _fdiv(self.y, other), _fdiv(self.z, other)
            )
        return NotImplemented

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Vector product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.squared_length())

    def squared_length(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; a zero vector yields nan components."""
        return self / self.length()

    def reflect(self, normal: Vec3) -> Vec3:
        """Reflect this vector about a surface with the given normal."""
        return self - normal * self.dot(normal) * 2.0