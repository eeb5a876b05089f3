"""Session tying a price list to a bound hall diagram."""
import logging
import math
from pathlib import Path
from typing import Optional, Sequence, Union

from pricemap.errors import DiagramLoadError
from pricemap.models.hall import SeatAssignment
from pricemap.models.price import MapperOptions, PriceColor
from pricemap.services.diagram_loader import DiagramLoader
from pricemap.services.hall_mapper import GeometryBinding, bind_geometry
from pricemap.services.price_mapper import PriceColorMapper

logger = logging.getLogger(__name__)


class HeatmapSession:
    """Owns the current prices, the mapper and the current diagram binding.

    Price colors are recomputed on every price change and pushed onto the bound
    diagram, if any. A failed diagram load leaves the session without a binding
    and records the error in ``diagram_error``.
    """

    def __init__(self, options: Optional[MapperOptions] = None, loader: Optional[DiagramLoader] = None):
        self.mapper = PriceColorMapper(options)
        self.loader = loader or DiagramLoader()
        self.prices: list[float] = []
        self.price_colors: list[PriceColor] = []
        self.binding: Optional[GeometryBinding] = None
        self.assignments: list[SeatAssignment] = []
        self.diagram_error: Optional[str] = None

    def set_prices(self, prices: Sequence[float]) -> list[PriceColor]:
        """Replace the price list and recolor the diagram."""
        ordered = sorted(prices)
        self.price_colors = self.mapper.map_prices_to_colors(ordered)
        self.prices = ordered
        self._update_hall()
        return self.price_colors

    def add_price(self, price: float) -> list[PriceColor]:
        """Add one price; non-positive or non-finite values are ignored."""
        if not math.isfinite(price) or price <= 0:
            logger.warning(f"Ignoring invalid price {price!r}")
            return self.price_colors
        return self.set_prices([*self.prices, price])

    def clear_prices(self) -> None:
        """Drop all prices and return the seats to the neutral fill."""
        self.prices = []
        self.price_colors = []
        self.assignments = []
        if self.binding is not None:
            self.binding.reset()

    def load_diagram(self, source: Union[str, Path]) -> Optional[GeometryBinding]:
        """
        Load and bind a hall diagram, then apply the current prices to it.

        Args:
            source: http(s) URL or filesystem path of the diagram

        Returns:
            The new binding, or None if the diagram could not be loaded or
            its geometry could not be read
        """
        try:
            root = self.loader.load(source)
            binding = bind_geometry(root)
            binding.parse_seats()
            binding.find_stage()
            binding.rank_by_distance()
        except (DiagramLoadError, ValueError) as e:
            logger.error(f"Diagram load failed: {e}")
            self.binding = None
            self.assignments = []
            self.diagram_error = str(e)
            return None

        self.binding = binding
        self.diagram_error = None
        self._update_hall()
        return binding

    def _update_hall(self) -> None:
        if self.binding is None or not self.prices:
            return
        self.assignments = self.binding.apply_colors(self.price_colors)

    def spectrum(self, steps: int = 20) -> list[PriceColor]:
        """Reference spectrum with this session's mapper options."""
        return self.mapper.spectrum(steps)
