"""
Demonstration Driver
====================
Builds the two sample segments, runs the solver and prints the result.

Why is this file needed?
------------------------
It is the only place that does I/O. The solver returns an optional point;
this module renders it as "(x, y, z)" or as the "no intersection" message.
"""
import logging
from typing import Optional

from segmentintersection.config import DEMO_SEGMENT_1, DEMO_SEGMENT_2, NO_INTERSECTION_MESSAGE
from segmentintersection.logging_config import setup_logging
from segmentintersection.model.geometry_primitives import Segment, Vector
from segmentintersection.solvers.intersection import intersect

logger = logging.getLogger(__name__)


def format_result(point: Optional[Vector]) -> str:
    if point is None:
        return NO_INTERSECTION_MESSAGE
    return str(point)


def build_demo_segments() -> tuple[Segment, Segment]:
    (s1, e1), (s2, e2) = DEMO_SEGMENT_1, DEMO_SEGMENT_2
    return Segment(Vector(*s1), Vector(*e1)), Segment(Vector(*s2), Vector(*e2))


def main(
    log_level: Optional[int] = None,
    log_file: Optional[str] = None,
    trace_solver: bool = False
) -> None:
    # Logging is silent unless explicitly requested
    # e.g. main(log_level=logging.INFO, trace_solver=True)
    if log_level is not None or trace_solver:
        setup_logging(
            level=logging.WARNING if log_level is None else log_level,
            log_file=log_file,
            trace_solver=trace_solver,
        )

    seg1, seg2 = build_demo_segments()
    logger.info(f"Intersecting {seg1.start}->{seg1.end} with {seg2.start}->{seg2.end}")

    print(format_result(intersect(seg1, seg2)))


if __name__ == "__main__":
    main()
