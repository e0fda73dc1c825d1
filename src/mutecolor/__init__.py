"""Mute colors for editor and UI themes.

Usage::

    from mutecolor import create_mute_function

    to_muted = create_mute_function("#a8b8b8")
    to_muted("#aabbcc")  # '#a6b0ba'

The returned converter keeps the hue of each color, halves its
saturation and replaces its lightness with the foreground's.
"""
from __future__ import annotations

from .core import DEFAULT_FOREGROUND, MuteColor, create_mute_function
from .utils import InvalidFormat

__all__ = ["DEFAULT_FOREGROUND", "InvalidFormat", "MuteColor", "create_mute_function"]
