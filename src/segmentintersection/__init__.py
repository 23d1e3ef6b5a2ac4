"""Intersection of two line segments in 3D space."""
from segmentintersection.model.geometry_primitives import Segment, Vector
from segmentintersection.model.geometry_utils import cross, dot, subtract
from segmentintersection.solvers.intersection import (
    IntersectionResult,
    IntersectionStatus,
    intersect,
    intersect_with_reason,
)

__all__ = [
    "Vector",
    "Segment",
    "cross",
    "dot",
    "subtract",
    "intersect",
    "intersect_with_reason",
    "IntersectionResult",
    "IntersectionStatus",
]
