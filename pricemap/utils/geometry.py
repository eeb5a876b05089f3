"""Geometry utilities for seat ranking."""
import math

from pricemap.models.hall import Point2D


def distance(a: Point2D, b: Point2D) -> float:
    """
    Euclidean distance between two points.

    Args:
        a: First point
        b: Second point

    Returns:
        Distance in diagram units
    """
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx*dx + dy*dy)


def interpolate(t: float, start: float, end: float) -> float:
    """
    Linear interpolation between two values.

    Exact at both ends: t=0 returns start and t=1 returns end.

    Args:
        t: Interpolation factor (0 = start, 1 = end)
        start: Starting value
        end: Ending value
    """
    return start * (1 - t) + end * t


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounding up."""
    return math.floor(value + 0.5)
