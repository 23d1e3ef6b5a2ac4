"""
The MODEL layer contains the pure value types (Vector, Segment) and the
vector algebra used on them. It has NO knowledge of the solver or the driver.
"""
