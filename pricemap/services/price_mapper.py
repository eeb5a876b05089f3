"""Service for mapping ticket prices to a perceptually ordered color spectrum."""
import logging
import math
from typing import Optional, Sequence

from pricemap.models.price import MapperOptions, PriceColor, Statistics
from pricemap.utils.color import hsl_to_rgb, rgb_to_hex, value_to_hsl
from pricemap.utils.geometry import interpolate
from pricemap.utils.statistics import (
    calculate_percentile,
    calculate_statistics,
    normal_cdf,
    smoothstep,
    z_score,
)

logger = logging.getLogger(__name__)

MIN_ABSOLUTE_WEIGHT = 0.2
ABSOLUTE_WEIGHT_DECAY = 20  # Batch size over the minimum at which the weight bottoms out


class PriceColorMapper:
    """Maps a batch of prices to colors.

    Each price gets a position in [0, 1] that blends where it sits inside the
    batch (a normal CDF over log prices) with where it sits on fixed absolute
    price bands. Small batches lean on the absolute bands.
    """

    def __init__(self, options: Optional[MapperOptions] = None):
        self.options = options or MapperOptions()

    def map_prices_to_colors(self, prices: Sequence[float]) -> list[PriceColor]:
        """
        Map prices to colors.

        Args:
            prices: Ticket prices, in any order

        Returns:
            One PriceColor per price, in input order

        Raises:
            ValueError: If any price is negative or not finite
        """
        if len(prices) == 0:
            return []

        for price in prices:
            if not math.isfinite(price) or price < 0:
                raise ValueError(f"Prices must be finite and non-negative, got {price}")

        if self.options.use_log_scale:
            transformed = [math.log1p(p) for p in prices]
        else:
            transformed = list(prices)

        stats = calculate_statistics(transformed)
        normalized = self.normalize_with_distribution(transformed, prices, stats)
        logger.debug(f"Mapped {len(prices)} prices (mean={stats.mean:.3f}, std_dev={stats.std_dev:.3f})")

        results = []
        for price, value, position in zip(prices, transformed, normalized):
            hsl = value_to_hsl(position)
            rgb = hsl_to_rgb(hsl)
            results.append(PriceColor(
                price=price,
                color=rgb_to_hex(rgb),
                color_rgb=rgb,
                color_hsl=hsl,
                normalized_value=position,
                percentile=calculate_percentile(value, transformed),
            ))
        return results

    def normalize_with_distribution(
        self,
        transformed_prices: Sequence[float],
        original_prices: Sequence[float],
        stats: Statistics,
    ) -> list[float]:
        """
        Compute the [0, 1] position of every price in the batch.

        Args:
            transformed_prices: Prices after the optional log transform
            original_prices: Untransformed prices, same order
            stats: Statistics of the transformed prices

        Returns:
            Normalized positions, same order as the input
        """
        min_batch = self.options.min_prices_for_stats
        if stats.n < min_batch:
            return [self.normalize_by_absolute_thresholds(p) for p in original_prices]

        absolute_weight = self.absolute_weight(stats.n)
        normalized = []
        for transformed, original in zip(transformed_prices, original_prices):
            relative = normal_cdf(z_score(transformed, stats))
            absolute = self.normalize_by_absolute_thresholds(original)
            combined = relative * (1 - absolute_weight) + absolute * absolute_weight
            normalized.append(max(0.0, min(1.0, combined)))
        return normalized

    def absolute_weight(self, n: int) -> float:
        """Share of the absolute estimate in the blend for a batch of n prices."""
        return max(MIN_ABSOLUTE_WEIGHT, 1 - (n - self.options.min_prices_for_stats) / ABSOLUTE_WEIGHT_DECAY)

    def normalize_by_absolute_thresholds(self, price: float) -> float:
        """
        Position of a price on the fixed absolute price bands.

        Between anchors the value follows a smoothstep curve. Above the top band
        it approaches 1.0 without reaching it.
        """
        anchors = self.options.absolute_thresholds.anchor_points()

        for (p0, v0), (p1, v1) in zip(anchors, anchors[1:]):
            if price <= p1:
                t = (price - p0) / (p1 - p0)
                return interpolate(smoothstep(t), v0, v1)

        very_high = self.options.absolute_thresholds.very_high
        return 0.9 + 0.1 * (1 - very_high / price)

    def spectrum(self, steps: int = 20, start: float = 100, step: float = 25000) -> list[PriceColor]:
        """Colors for an evenly spaced reference price range."""
        return self.map_prices_to_colors([start + i * step for i in range(steps)])


def map_prices_to_colors(
    prices: Sequence[float],
    options: Optional[MapperOptions] = None,
) -> list[PriceColor]:
    """Map prices to colors with a one-off mapper."""
    return PriceColorMapper(options).map_prices_to_colors(prices)
