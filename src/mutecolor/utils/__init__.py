"""Color conversion helpers for mutecolor."""
from __future__ import annotations
import logging
import math
import re
from typing import Tuple

logger = logging.getLogger(__name__)

HEX_PATTERN = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")

ONE_THIRD = 1 / 3
ONE_SIXTH = 1 / 6
TWO_THIRDS = 2 / 3


class InvalidFormat(ValueError):
    """Raised when a string is not a ``#RRGGBB`` hex color."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid hex color {value!r}, expected '#RRGGBB'")
        self.value = value


def normalize(hex_color: str) -> Tuple[float, float, float]:
    """Convert a ``#RRGGBB`` string to a normalized RGB tuple.

    Raises :class:`InvalidFormat` unless ``hex_color`` is exactly ``#``
    followed by six hexadecimal digits.
    """
    match = HEX_PATTERN.fullmatch(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        logger.debug("Rejected color %r", hex_color)
        raise InvalidFormat(hex_color)
    return tuple(int(group, 16) / 255 for group in match.groups())  # type: ignore


def lightness(r: float, g: float, b: float) -> float:
    return (max(r, g, b) + min(r, g, b)) / 2


def rgb_to_hue_saturation(r: float, g: float, b: float) -> Tuple[float, float]:
    """Return ``(hue, saturation)`` of a normalized RGB color.

    Achromatic colors yield ``(0.0, 0.0)``. When two channels share the
    maximum, red wins over green and green over blue.
    """
    high, low = max(r, g, b), min(r, g, b)
    diff = high - low
    if not diff:
        return 0.0, 0.0

    saturation = diff / (1 - abs(high + low - 1))

    if high == r:
        hue = (g - b) / diff + (6 if g < b else 0)
    elif high == g:
        hue = (b - r) / diff + 2
    else:
        hue = (r - g) / diff + 4
    return hue / 6, saturation


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < ONE_SIXTH:
        return p + (q - p) * 6 * t
    if t < 0.5:
        return q
    if t < TWO_THIRDS:
        return p + (q - p) * (TWO_THIRDS - t) * 6
    return p


def _to_byte(channel: float) -> int:
    # Half-up rounding; round() would round halves to even.
    return int(math.floor(channel * 255 + 0.5))


def hsl_to_hex(hue: float, saturation: float, lightness: float) -> str:
    """Convert normalized HSL components to a lowercase ``#rrggbb`` string.

    Components are not range checked; keeping them in ``[0, 1]`` is up to
    the caller.
    """
    if lightness < 0.5:
        q = lightness * (1 + saturation)
    else:
        q = lightness + saturation - lightness * saturation
    p = 2 * lightness - q

    rgb = (
        _hue_to_channel(p, q, hue + ONE_THIRD),
        _hue_to_channel(p, q, hue),
        _hue_to_channel(p, q, hue - ONE_THIRD),
    )
    return "#" + "".join(f"{_to_byte(c):02x}" for c in rgb)


__all__ = [
    "InvalidFormat",
    "normalize",
    "lightness",
    "rgb_to_hue_saturation",
    "hsl_to_hex",
]
