"""
Configuration & Global Constants
================================
This module serves as the central registry for numerical tolerances and
the demonstration inputs.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (e.g. 1e-8) scattered throughout
   the solver and the tests.
2. Consistency: The driver and the regression tests share the same sample
   segments and the same "no result" message.

Exports:
    PARALLEL_TOLERANCE (float): Threshold on |d1 x d2|² below which two
        segments are treated as parallel (or degenerate).
    NO_INTERSECTION_MESSAGE (str): Text printed by the driver when there is no result.
    DEMO_SEGMENT_1, DEMO_SEGMENT_2 (tuple): Endpoints of the shipped example.
"""
Coordinates = tuple[float, float, float]

# Compared against a SQUARED length, see Vector.length_squared()
PARALLEL_TOLERANCE: float = 1e-8

NO_INTERSECTION_MESSAGE: str = "No intersection point found."

DEMO_SEGMENT_1: tuple[Coordinates, Coordinates] = ((0.0, 3.0, 3.0), (3.0, 3.0, 3.0))
DEMO_SEGMENT_2: tuple[Coordinates, Coordinates] = ((0.0, 0.0, 0.0), (11.0, 5.0, 0.0))
