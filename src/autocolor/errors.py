"""Exceptions raised by autocolor."""


class AutocolorError(Exception):
    """Base class for autocolor errors."""


class ConfigError(AutocolorError, ValueError):
    """A color set or project configuration is malformed."""


class InvalidRangeError(AutocolorError, ValueError):
    """A configured hue, saturation or lightness range has no width."""
