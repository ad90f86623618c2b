"""Small vector and quaternion types used by animation tracks."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Union

_EPSILON = 1e-12


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vec3:
        return self.__mul__(scalar)


def lerp(a: Vec3, b: Vec3, t: float) -> Vec3:
    """Linearly interpolate between two vectors."""
    return a * (1.0 - t) + b * t


@dataclass(frozen=True)
class Quat:
    """An immutable quaternion stored as (x, y, z, w); defaults to identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __mul__(self, scalar: float) -> Quat:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Quat(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: float) -> Quat:
        return self.__mul__(scalar)

    def __neg__(self) -> Quat:
        return Quat(-self.x, -self.y, -self.z, -self.w)

    def length(self) -> float:
        """Euclidean norm of the four components."""
        return math.sqrt(dot(self, self))

    def normalized(self) -> Quat:
        """Return a unit-length copy; a zero quaternion is returned unchanged."""
        length_sq = dot(self, self)
        if length_sq < _EPSILON:
            return self
        return self * (1.0 / math.sqrt(length_sq))


def dot(a: Union[Quat, Vec3], b: Union[Quat, Vec3]) -> float:
    """Component-wise dot product."""
    return sum(p * q for p, q in zip(a, b))


def mix(a: Quat, b: Quat, t: float) -> Quat:
    """Blend two quaternions linearly without renormalising."""
    return a * (1.0 - t) + b * t