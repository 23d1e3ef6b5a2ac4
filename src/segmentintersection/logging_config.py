"""
Logging Configuration
Routes the package's log records away from the driver's stdout result.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "segmentintersection"
SOLVER_LOGGER = "segmentintersection.solvers"

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    *,
    trace_solver: bool = False
) -> logging.Logger:
    """
    Attach handlers to the 'segmentintersection' logger.

    Records go to stderr so they never interleave with the result printed on stdout.

    Args:
        level: Level for the package logger.
        log_file: Optional path; the file is overwritten on every call.
        trace_solver: If True, the solver logger is lowered to DEBUG regardless of
            `level`, so every parallel/out-of-range rejection is recorded.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    solver_logger = logging.getLogger(SOLVER_LOGGER)
    solver_logger.setLevel(logging.DEBUG if trace_solver else logging.NOTSET)

    # Handlers stay at NOTSET: filtering is done by the two logger levels above
    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging configured (file: {log_file}, solver trace: {trace_solver}).")
    return logger
