from .price import AbsoluteThresholds, MapperOptions, Statistics, RGBColor, HSLColor, PriceColor
from .hall import Point2D, BoundingBox, Seat, Stage, SeatAssignment

__all__ = [
    "AbsoluteThresholds",
    "MapperOptions",
    "Statistics",
    "RGBColor",
    "HSLColor",
    "PriceColor",
    "Point2D",
    "BoundingBox",
    "Seat",
    "Stage",
    "SeatAssignment",
]
