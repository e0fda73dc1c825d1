"""Muting converters."""
from .muting import DEFAULT_FOREGROUND, MuteColor, create_mute_function

__all__ = ["DEFAULT_FOREGROUND", "MuteColor", "create_mute_function"]
