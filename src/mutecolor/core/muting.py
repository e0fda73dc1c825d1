"""Converters that make colors shy against an editor background.

A converter is built once from a hand-picked foreground color. Every
color passed through it keeps its hue, loses half of its saturation and
takes on the foreground's lightness.
"""
from __future__ import annotations
from dataclasses import dataclass
import logging

from ..utils import hsl_to_hex, lightness, normalize, rgb_to_hue_saturation

logger = logging.getLogger(__name__)

DEFAULT_FOREGROUND = "#a8b8b8"


@dataclass(frozen=True)
class MuteColor:
    """Mute colors to a fixed reference lightness.

    Instances are immutable and may be shared between threads.
    """

    lightness: float

    @classmethod
    def from_foreground(cls, foreground: str) -> "MuteColor":
        """Capture the lightness of ``foreground``.

        Raises :class:`~mutecolor.utils.InvalidFormat` for a malformed
        foreground.
        """
        reference = lightness(*normalize(foreground))
        logger.debug("Muting to lightness %.4f of %s", reference, foreground)
        return cls(reference)

    def mute(self, hex_color: str) -> str:
        """Return ``hex_color`` with halved saturation and the reference lightness."""
        hue, saturation = rgb_to_hue_saturation(*normalize(hex_color))
        return hsl_to_hex(hue, saturation / 2, self.lightness)

    def __call__(self, hex_color: str) -> str:
        return self.mute(hex_color)


def create_mute_function(foreground: str = DEFAULT_FOREGROUND) -> MuteColor:
    """Build a converter for colors shown next to ``foreground``.

    >>> to_muted = create_mute_function("#a8b8b8")
    >>> to_muted("#aabbcc")
    '#a6b0ba'
    """
    return MuteColor.from_foreground(foreground)
