"""Color space conversions for the price spectrum."""

from pricemap.models.price import HSLColor, RGBColor
from pricemap.utils.geometry import interpolate, round_half_up
from pricemap.utils.statistics import smoothstep

# (position, hue in degrees): cold blue for cheap through green to red for expensive
HUE_STOPS = [
    (0.0, 215.0),
    (0.1, 205.0),
    (0.2, 190.0),
    (0.28, 170.0),
    (0.35, 150.0),
    (0.42, 120.0),
    (0.5, 90.0),
    (0.58, 70.0),
    (0.65, 55.0),
    (0.72, 45.0),
    (0.8, 35.0),
    (0.9, 20.0),
    (1.0, 5.0),
]

HUE_BELOW_RANGE = 220.0
HUE_ABOVE_RANGE = 0.0


def interpolate_hue(t: float) -> float:
    """
    Map a normalized position to a hue.

    Positions at or below 0 give 220 and at or above 1 give 0; both lie
    outside the table's own endpoints.
    """
    if t <= 0:
        return HUE_BELOW_RANGE
    if t >= 1:
        return HUE_ABOVE_RANGE

    for (t0, h0), (t1, h1) in zip(HUE_STOPS, HUE_STOPS[1:]):
        if t <= t1:
            local_t = (t - t0) / (t1 - t0)
            return interpolate(smoothstep(local_t), h0, h1)

    return HUE_ABOVE_RANGE


def value_to_hsl(value: float) -> HSLColor:
    """
    Convert a normalized value to an HSL color.

    Saturation rises and lightness drops towards both ends of the range so
    the extremes stand out against the middle.
    """
    spread = abs(value - 0.5) * 2
    saturation = 45 + 25 * spread ** 0.7
    lightness = 53 - 5 * spread ** 0.5
    return HSLColor(h=interpolate_hue(value), s=saturation, l=lightness)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def _to_byte(channel: float) -> int:
    return max(0, min(255, round_half_up(channel * 255)))


def hsl_to_rgb(hsl: HSLColor) -> RGBColor:
    """Convert HSL to integer RGB channels in 0-255."""
    h = hsl.h / 360
    s = hsl.s / 100
    l = hsl.l / 100

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGBColor(r=_to_byte(r), g=_to_byte(g), b=_to_byte(b))


def rgb_to_hex(rgb: RGBColor) -> str:
    """Render RGB as a lowercase ``#rrggbb`` string."""
    return f"#{rgb.r:02x}{rgb.g:02x}{rgb.b:02x}"
