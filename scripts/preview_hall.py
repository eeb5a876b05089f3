#!/usr/bin/env python3
"""Preview the price coloring of a hall diagram."""
import sys
from collections import Counter
from typing import Optional

from pricemap.config import DEFAULT_HALL, MAPPER_CONFIG_PATH, configure_logging
from pricemap.models.price import MapperOptions
from pricemap.services.session import HeatmapSession

DEFAULT_PRICES = [300, 500, 800, 1200, 1800, 2500, 3500, 5000, 7000, 10000, 15000, 20000]


def preview_hall(source: str = DEFAULT_HALL, prices: Optional[list[float]] = None):
    """Color a hall diagram and print a summary per price zone."""
    if prices is None:
        prices = list(DEFAULT_PRICES)
    options = MapperOptions.load(MAPPER_CONFIG_PATH) if MAPPER_CONFIG_PATH.exists() else MapperOptions()
    session = HeatmapSession(options)
    session.set_prices(prices)

    print(f"Previewing: {source}")
    binding = session.load_diagram(source)
    if binding is None:
        print(f"Error: {session.diagram_error}")
        sys.exit(1)

    print(f"Stage ({binding.stage.source}): center=({binding.stage.center.x:.1f}, "
          f"{binding.stage.center.y:.1f}), bottom={binding.stage.bottom_y:.1f}")
    print(f"Seats: {len(binding.seats)}")

    seats_per_price = Counter(a.price for a in session.assignments)

    print("\nPrice zones:")
    print("-" * 60)
    for pc in session.price_colors:
        print(f"  {pc.price:>10,.0f}  {pc.color}  norm={pc.normalized_value:.2f}  "
              f"seats={seats_per_price.get(pc.price, 0)}")


if __name__ == "__main__":
    configure_logging()
    hall = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_HALL
    prices = [float(p) for p in sys.argv[2:]] or DEFAULT_PRICES
    preview_hall(hall, prices)
