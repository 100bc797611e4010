"""Deterministic, category-scoped label colors."""

from autocolor.cache import DEFAULT_CACHE, ColorCache
from autocolor.color import ColorConfig, ColorGenerator, generate_color, hsl_to_hex
from autocolor.colorset import ColorSet, create_color_set, set_precomputed_colors, use_auto_color
from autocolor.errors import AutocolorError, ConfigError, InvalidRangeError
from autocolor.hashing import murmur_hash3, text_hash
from autocolor.scanner import load_precomputed
from autocolor.similarity import Algorithm, similarity_score

__all__ = [
    "Algorithm",
    "AutocolorError",
    "ColorCache",
    "ColorConfig",
    "ColorGenerator",
    "ColorSet",
    "ConfigError",
    "DEFAULT_CACHE",
    "InvalidRangeError",
    "create_color_set",
    "generate_color",
    "hsl_to_hex",
    "load_precomputed",
    "murmur_hash3",
    "set_precomputed_colors",
    "similarity_score",
    "text_hash",
    "use_auto_color",
]
