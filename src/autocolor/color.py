"""Color configuration and hash-to-HSL generation."""

from __future__ import annotations

import colorsys
import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any

from autocolor.errors import ConfigError, InvalidRangeError
from autocolor.similarity import Algorithm

DEFAULT_CATEGORY = "default"
DEFAULT_HUE = (0, 360)
DEFAULT_SATURATION = (70, 100)
DEFAULT_LIGHTNESS = (40, 60)
DEFAULT_THRESHOLD = 0.7

_ALIASES = {"similarityThreshold": "similarity_threshold"}

_HSL = re.compile(
    r"^\s*hsl\(\s*(-?[\d.]+)\s*,\s*(-?[\d.]+)%\s*,\s*(-?[\d.]+)%\s*\)\s*$",
    re.IGNORECASE,
)


def _as_range(name: str, value: Any) -> tuple[float, float]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or len(value) != 2:
        raise ConfigError(f"{name} must be a [min, max] pair, got {value!r}")
    low, high = value
    for bound in (low, high):
        if isinstance(bound, bool) or not isinstance(bound, (int, float)):
            raise ConfigError(f"{name} bounds must be numbers, got {value!r}")
    return (low, high)


@dataclass(frozen=True)
class ColorConfig:
    """Immutable settings for one color set.

    Ranges are half-open [min, max) intervals. Width is checked when a color
    is generated, not here.
    """

    category: str = DEFAULT_CATEGORY
    hue: tuple[float, float] = DEFAULT_HUE
    saturation: tuple[float, float] = DEFAULT_SATURATION
    lightness: tuple[float, float] = DEFAULT_LIGHTNESS
    algorithm: Algorithm = Algorithm.HASH
    similarity_threshold: float = DEFAULT_THRESHOLD

    def __post_init__(self) -> None:
        if not isinstance(self.category, str):
            raise ConfigError(f"category must be a string, got {self.category!r}")
        for name in ("hue", "saturation", "lightness"):
            object.__setattr__(self, name, _as_range(name, getattr(self, name)))
        algorithm = Algorithm.parse(self.algorithm)
        if algorithm is None:
            choices = ", ".join(a.value for a in Algorithm)
            raise ConfigError(f"unknown algorithm {self.algorithm!r} (expected one of: {choices})")
        object.__setattr__(self, "algorithm", algorithm)
        threshold = self.similarity_threshold
        if threshold is None:
            threshold = DEFAULT_THRESHOLD
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            raise ConfigError(f"similarity_threshold must be a number, got {threshold!r}")
        object.__setattr__(self, "similarity_threshold", float(threshold))

    @classmethod
    def from_value(cls, value: ColorConfig | Mapping[str, Any] | str | None = None) -> ColorConfig:
        """Build a config from a category name, an options mapping, or a config."""
        if value is None:
            return cls()
        if isinstance(value, ColorConfig):
            return value
        if isinstance(value, str):
            return cls(category=value)
        if not isinstance(value, Mapping):
            raise ConfigError(f"expected a category name or options mapping, got {value!r}")

        known = {f.name for f in fields(cls)}
        options: dict[str, Any] = {}
        for key, option in value.items():
            key = _ALIASES.get(key, key)
            if key not in known:
                raise ConfigError(f"unknown color set option {key!r}")
            if option is not None:
                options[key] = option
        return cls(**options)

    def replace(self, **changes: Any) -> ColorConfig:
        """Return a copy with some options changed."""
        options = {f.name: getattr(self, f.name) for f in fields(self)}
        options.update(changes)
        return ColorConfig.from_value(options)

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "hue": list(self.hue),
            "saturation": list(self.saturation),
            "lightness": list(self.lightness),
            "algorithm": self.algorithm.value,
            "similarity_threshold": self.similarity_threshold,
        }


def _width(name: str, bounds: tuple[float, float]) -> float:
    width = bounds[1] - bounds[0]
    if width <= 0:
        raise InvalidRangeError(f"{name} range {list(bounds)} is empty")
    return width


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def generate_color(hash_value: int, config: ColorConfig) -> str:
    """Map a 32-bit hash onto the config's HSL ranges.

    Hue uses the low bits, saturation the hash shifted by 8, lightness the
    hash shifted by 16. Raises InvalidRangeError for a zero or negative width.
    """
    hue_width = _width("hue", config.hue)
    sat_width = _width("saturation", config.saturation)
    light_width = _width("lightness", config.lightness)

    hue = config.hue[0] + (hash_value % hue_width)
    sat = config.saturation[0] + ((hash_value >> 8) % sat_width)
    light = config.lightness[0] + ((hash_value >> 16) % light_width)

    return f"hsl({_format_number(hue)}, {_format_number(sat)}%, {_format_number(light)}%)"


class ColorGenerator:
    """Generates colors for one configuration."""

    def __init__(self, config: ColorConfig | Mapping[str, Any] | str | None = None) -> None:
        self.config = ColorConfig.from_value(config)

    def generate(self, hash_value: int) -> str:
        return generate_color(hash_value, self.config)

    def color_for(self, text: str, hash_fn: Callable[[str], int]) -> str:
        """Hash text with hash_fn and generate its color."""
        return self.generate(hash_fn(text))


def parse_hsl(color: str) -> tuple[float, float, float] | None:
    """Parse "hsl(H, S%, L%)" into numbers, or None if malformed."""
    if not isinstance(color, str):
        return None
    match = _HSL.match(color)
    if not match:
        return None
    try:
        return tuple(float(part) for part in match.groups())
    except ValueError:
        return None


def hsl_to_hex(color: str) -> str | None:
    """Convert an HSL color string to "#rrggbb", or None if malformed."""
    parsed = parse_hsl(color)
    if parsed is None:
        return None
    hue, sat, light = parsed
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360, min(max(light, 0), 100) / 100, min(max(sat, 0), 100) / 100)
    return "#{:02x}{:02x}{:02x}".format(round(r * 255), round(g * 255), round(b * 255))
