from segmentintersection.solvers.intersection import (
    IntersectionResult,
    IntersectionStatus,
    intersect,
    intersect_with_reason,
)

__all__ = [
    "IntersectionResult",
    "IntersectionStatus",
    "intersect",
    "intersect_with_reason",
]
