"""Price, statistics and color data models."""
from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from pricemap.config import DEFAULT_MIN_PRICES_FOR_STATS, DEFAULT_THRESHOLDS


class AbsoluteThresholds(BaseModel):
    """Fixed price bands anchoring the absolute estimate."""
    very_low: float = Field(default=DEFAULT_THRESHOLDS["very_low"], gt=0, description="Price mapped to 0.1")
    low: float = Field(default=DEFAULT_THRESHOLDS["low"], gt=0, description="Price mapped to 0.25")
    medium: float = Field(default=DEFAULT_THRESHOLDS["medium"], gt=0, description="Price mapped to 0.5")
    high: float = Field(default=DEFAULT_THRESHOLDS["high"], gt=0, description="Price mapped to 0.75")
    very_high: float = Field(default=DEFAULT_THRESHOLDS["very_high"], gt=0, description="Price mapped to 0.9")

    @model_validator(mode="after")
    def check_ascending(self) -> "AbsoluteThresholds":
        bands = [self.very_low, self.low, self.medium, self.high, self.very_high]
        if any(a >= b for a, b in zip(bands, bands[1:])):
            raise ValueError(f"Thresholds must be strictly increasing, got {bands}")
        return self

    def anchor_points(self) -> list[tuple[float, float]]:
        """(price, value) anchors used for interpolation."""
        return [
            (0.0, 0.0),
            (self.very_low, 0.1),
            (self.low, 0.25),
            (self.medium, 0.5),
            (self.high, 0.75),
            (self.very_high, 0.9),
        ]


class MapperOptions(BaseModel):
    """Options for the price to color mapper."""
    absolute_thresholds: AbsoluteThresholds = Field(default_factory=AbsoluteThresholds)
    use_log_scale: bool = Field(default=True, description="Apply log1p before computing statistics")
    min_prices_for_stats: int = Field(
        default=DEFAULT_MIN_PRICES_FOR_STATS,
        ge=1,
        description="Below this batch size only the absolute estimate is used",
    )

    @classmethod
    def load(cls, config_path: Union[str, Path]) -> "MapperOptions":
        """Load mapper options from a YAML file with a top-level ``mapper`` key."""
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Mapper config not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**(data.get("mapper") or {}))


class Statistics(BaseModel):
    """Descriptive statistics of one price batch."""
    model_config = ConfigDict(frozen=True)

    mean: float
    std_dev: float = Field(ge=0)
    min: float
    max: float
    median: float
    q1: float
    q3: float
    iqr: float
    n: int = Field(ge=1)


class RGBColor(BaseModel):
    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)


class HSLColor(BaseModel):
    """Hue in degrees, saturation and lightness in percent."""
    model_config = ConfigDict(frozen=True)

    h: float = Field(ge=0, le=360)
    s: float = Field(ge=0, le=100)
    l: float = Field(ge=0, le=100)


class PriceColor(BaseModel):
    """A price with its derived color."""
    model_config = ConfigDict(frozen=True)

    price: float
    color: str = Field(pattern=r"^#[0-9a-f]{6}$")
    color_rgb: RGBColor
    color_hsl: HSLColor
    normalized_value: float = Field(ge=0, le=1)
    percentile: float = Field(ge=0, le=100)
