"""Tests for the price to color mapper."""

import random
import re

import pytest

from pricemap.models.price import AbsoluteThresholds, MapperOptions
from pricemap.services.price_mapper import PriceColorMapper, map_prices_to_colors
from pricemap.utils.statistics import calculate_statistics

HEX_COLOR = re.compile(r"^#[0-9a-f]{6}$")


@pytest.fixture
def mapper() -> PriceColorMapper:
    return PriceColorMapper()


class TestAbsoluteThresholds:
    """Tests for the absolute-threshold estimate."""

    def test_anchor_values_are_exact(self, mapper):
        assert mapper.normalize_by_absolute_thresholds(0) == 0
        assert mapper.normalize_by_absolute_thresholds(500) == 0.1
        assert mapper.normalize_by_absolute_thresholds(1500) == 0.25
        assert mapper.normalize_by_absolute_thresholds(3500) == 0.5
        assert mapper.normalize_by_absolute_thresholds(7000) == pytest.approx(0.75)
        assert mapper.normalize_by_absolute_thresholds(15000) == pytest.approx(0.9)

    def test_monotonic(self, mapper):
        """Test that the estimate never decreases with price."""
        values = [mapper.normalize_by_absolute_thresholds(p) for p in range(0, 60000, 50)]
        assert all(a <= b for a, b in zip(values, values[1:]))

    def test_smoothstep_between_anchors(self, mapper):
        """Test that the midpoint of a band maps to the band's midpoint value."""
        assert mapper.normalize_by_absolute_thresholds(1000) == pytest.approx(0.175)
        # A quarter of the way in lies below the linear value
        assert mapper.normalize_by_absolute_thresholds(750) < 0.1375

    def test_above_top_band_approaches_one(self, mapper):
        assert mapper.normalize_by_absolute_thresholds(30000) == pytest.approx(0.95)
        assert mapper.normalize_by_absolute_thresholds(1e9) < 1.0

    def test_custom_thresholds(self):
        options = MapperOptions(
            absolute_thresholds=AbsoluteThresholds(very_low=10, low=20, medium=30, high=40, very_high=50)
        )
        mapper = PriceColorMapper(options)

        assert mapper.normalize_by_absolute_thresholds(30) == 0.5
        assert mapper.normalize_by_absolute_thresholds(100) == pytest.approx(0.95)


class TestNormalizeWithDistribution:
    """Tests for blending the relative and absolute estimates."""

    def test_small_batch_uses_absolute_estimate_exactly(self, mapper):
        prices = [800, 2000, 9000]
        results = mapper.map_prices_to_colors(prices)

        for price, result in zip(prices, results):
            assert result.normalized_value == mapper.normalize_by_absolute_thresholds(price)

    def test_equal_prices_relative_component_is_half(self, mapper):
        """Test that a zero-spread batch puts every price at the CDF center."""
        prices = [2000.0] * 6
        transformed = list(prices)
        stats = calculate_statistics(transformed)
        assert stats.std_dev == 0

        weight = mapper.absolute_weight(stats.n)
        absolute = mapper.normalize_by_absolute_thresholds(2000)
        expected = 0.5 * (1 - weight) + absolute * weight

        for value in mapper.normalize_with_distribution(transformed, prices, stats):
            assert value == pytest.approx(expected, abs=1e-6)

    def test_absolute_weight(self, mapper):
        assert mapper.absolute_weight(5) == 1.0
        assert mapper.absolute_weight(15) == pytest.approx(0.5)
        assert mapper.absolute_weight(100) == 0.2

    def test_large_batch_orders_prices(self, mapper):
        prices = list(range(100, 40000, 900))
        values = [r.normalized_value for r in mapper.map_prices_to_colors(prices)]
        assert all(a <= b for a, b in zip(values, values[1:]))

    def test_linear_scale(self):
        options = MapperOptions(use_log_scale=False)
        results = PriceColorMapper(options).map_prices_to_colors([100, 200, 300, 400, 500, 600])
        assert results[0].normalized_value < results[-1].normalized_value


class TestMapPricesToColors:
    """Tests for the full mapping pipeline."""

    def test_empty(self):
        assert map_prices_to_colors([]) == []

    def test_output_ranges(self, default_prices):
        rng = random.Random(7)
        batches = [default_prices, [1200], [5, 5, 5, 5, 5], [rng.uniform(1, 50000) for _ in range(40)]]

        for batch in batches:
            for result in map_prices_to_colors(batch):
                assert 0 <= result.normalized_value <= 1
                assert 0 <= result.percentile <= 100
                assert HEX_COLOR.match(result.color)

    def test_input_order_preserved(self):
        prices = [5000, 300, 1200]
        results = map_prices_to_colors(prices)
        assert [r.price for r in results] == prices

    def test_deterministic(self, default_prices):
        assert map_prices_to_colors(default_prices) == map_prices_to_colors(default_prices)

    def test_color_matches_components(self, mapper):
        result = mapper.map_prices_to_colors([1500])[0]
        rgb = result.color_rgb
        assert result.color == f"#{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}"

    def test_percentiles(self, default_prices):
        results = map_prices_to_colors(default_prices)
        assert results[0].percentile == 0
        assert results[-1].percentile == 100

    def test_negative_price_rejected(self):
        with pytest.raises(ValueError):
            map_prices_to_colors([100, -5])

    def test_spectrum(self, mapper):
        results = mapper.spectrum()
        assert len(results) == 20
        assert results[0].price == 100
        assert results[1].price == 25100
