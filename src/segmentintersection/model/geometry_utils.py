from __future__ import annotations

from segmentintersection.model.geometry_primitives import Vector


def cross(a: Vector, b: Vector) -> Vector:
    """
    Cross product a x b.

    Args:
        a: Left operand.
        b: Right operand.

    Returns:
        The vector (ay*bz - az*by, az*bx - ax*bz, ax*by - ay*bx).
        Its squared length is zero when `a` and `b` are parallel or either is zero.
    """
    return Vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x
    )


def dot(a: Vector, b: Vector) -> float:
    """Scalar (dot) product of two vectors."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def subtract(a: Vector, b: Vector) -> Vector:
    return Vector(a.x - b.x, a.y - b.y, a.z - b.z)
