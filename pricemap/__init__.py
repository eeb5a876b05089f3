"""Price heat maps for venue seating diagrams."""
from pricemap.models import MapperOptions, PriceColor, Seat, SeatAssignment, Stage, Statistics
from pricemap.services.hall_mapper import GeometryBinding, bind_geometry
from pricemap.services.price_mapper import PriceColorMapper, map_prices_to_colors
from pricemap.services.session import HeatmapSession

__all__ = [
    "MapperOptions",
    "PriceColor",
    "Seat",
    "SeatAssignment",
    "Stage",
    "Statistics",
    "GeometryBinding",
    "bind_geometry",
    "PriceColorMapper",
    "map_prices_to_colors",
    "HeatmapSession",
]
