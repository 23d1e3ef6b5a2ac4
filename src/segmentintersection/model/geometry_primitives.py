"""
Geometric Primitives for Segment Intersection.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Union, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt

@dataclass(frozen=True)
class Vector:
    """
    An immutable vector (or point) in 3D space.

    NOTE: `length_squared()` returns x² + y² + z², NOT the Euclidean length.
    Tolerances in the solver are expressed in these squared units.
    Use `magnitude` when the true length is needed.
    """
    x: float
    y: float
    z: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vector:
        return self * scalar

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"

    def length_squared(self) -> float:
        """Squared magnitude x² + y² + z²."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.length_squared())

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, values: Union[Sequence[float], npt.NDArray[np.float64]]) -> Vector:
        """Build a Vector from 2 or 3 components (z defaults to 0)."""
        coords = np.asarray(values, dtype=np.float64).ravel()
        if coords.size not in (2, 3):
            raise ValueError(f"Expected 2 or 3 components, got {coords.size}.")
        return cls(*(float(c) for c in coords))


@dataclass(frozen=True)
class Segment:
    """A directed straight segment from `start` to `end`."""
    start: Vector
    end: Vector

    @property
    def direction(self) -> Vector:
        return self.end - self.start

    @property
    def is_degenerate(self) -> bool:
        return self.start == self.end

    def length_squared(self) -> float:
        """Squared length of the segment (see `Vector.length_squared`)."""
        return self.direction.length_squared()

    @property
    def length(self) -> float:
        return self.direction.magnitude

    def point_at(self, t: float) -> Vector:
        """Point of the parametric form P(t) = start + t * (end - start)."""
        return self.start + self.direction * t

    def reverse(self) -> Segment:
        return Segment(start=self.end, end=self.start)
