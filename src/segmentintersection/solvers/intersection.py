"""
Segment-Segment Intersection Solver
===================================
Finds the crossing point of two segments in 3D using the parametric form
of a line:

    P1(t1) = s1 + t1 * d1,   d1 = e1 - s1
    P2(t2) = s2 + t2 * d2,   d2 = e2 - s2

With n = d1 x d2 and d12 = s2 - s1:

    t1 = ((d12 x d2) . n) / |n|²
    t2 = ((d12 x d1) . n) / |n|²

Limitations:
    - |n|² < eps is reported as "no intersection". This covers parallel segments,
      zero-length segments AND collinear overlapping segments (including a segment
      intersected with itself).
    - Coplanarity is NOT verified. For skew segments the formula still returns
      parameters; if both fall in [0, 1] the returned point lies on segment 1
      but not on segment 2.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Optional

from segmentintersection.config import PARALLEL_TOLERANCE
from segmentintersection.model.geometry_primitives import Segment, Vector
from segmentintersection.model.geometry_utils import cross, dot, subtract

logger = logging.getLogger(__name__)


class IntersectionStatus(StrEnum):
    INTERSECTING = "intersecting"
    PARALLEL = "parallel"
    OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class IntersectionResult:
    """Outcome of `intersect_with_reason`. `t1`/`t2` are None for parallel segments."""
    point: Optional[Vector]
    reason: IntersectionStatus
    t1: Optional[float] = None
    t2: Optional[float] = None

    @property
    def found(self) -> bool:
        return self.point is not None


def _in_unit_interval(t: float) -> bool:
    return 0.0 <= t <= 1.0


def intersect_with_reason(
    seg1: Segment,
    seg2: Segment,
    *,
    eps: float = PARALLEL_TOLERANCE
) -> IntersectionResult:
    """
    Compute the intersection of two segments and report why none was found.

    Accepts and rejects exactly the same inputs as `intersect`.

    Args:
        seg1: First segment. The returned point is computed on its line.
        seg2: Second segment.
        eps: Threshold for |d1 x d2|² (squared units) below which the segments
             are treated as parallel. Default is PARALLEL_TOLERANCE.

    Returns:
        IntersectionResult with the point (or None), the status and the solved
        parameters t1, t2.
    """
    d1 = subtract(seg1.end, seg1.start)
    d2 = subtract(seg2.end, seg2.start)
    d12 = subtract(seg2.start, seg1.start)

    n = cross(d1, d2)
    m = n.length_squared()
    if m < eps:
        logger.debug(f"Segments are parallel or degenerate (|d1 x d2|^2 = {m:g}).")
        return IntersectionResult(point=None, reason=IntersectionStatus.PARALLEL)

    t1 = dot(cross(d12, d2), n) / m
    t2 = dot(cross(d12, d1), n) / m

    # Endpoints are inclusive: touching counts as intersecting
    if not (_in_unit_interval(t1) and _in_unit_interval(t2)):
        logger.debug(f"Parameters out of range: t1={t1:g}, t2={t2:g}.")
        return IntersectionResult(point=None, reason=IntersectionStatus.OUT_OF_RANGE, t1=t1, t2=t2)

    point = seg1.start + d1 * t1
    logger.debug(f"Intersection found at {point} (t1={t1:g}, t2={t2:g}).")
    return IntersectionResult(point=point, reason=IntersectionStatus.INTERSECTING, t1=t1, t2=t2)


def intersect(
    seg1: Segment,
    seg2: Segment,
    *,
    eps: float = PARALLEL_TOLERANCE
) -> Optional[Vector]:
    """
    Intersection point of two 3D segments, or None.

    None is returned for parallel/degenerate segments and when the crossing of
    the supporting lines lies outside either segment. The reasons are not
    distinguished, use `intersect_with_reason` for that.
    """
    return intersect_with_reason(seg1, seg2, eps=eps).point
