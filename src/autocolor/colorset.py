"""Color sets: cached, optionally similarity-aware label coloring."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from autocolor.cache import DEFAULT_CACHE, ColorCache
from autocolor.color import ColorConfig, ColorGenerator
from autocolor.hashing import text_hash
from autocolor.similarity import similarity_score

logger = logging.getLogger(__name__)


class ColorSet:
    """Resolves labels to colors within one category.

    A lookup is a cache hit, a reuse of the most similar cached label's
    color (when the config names a similarity algorithm), or a fresh
    hash-derived color. Whatever it returns is in the cache afterwards.
    """

    def __init__(
        self,
        config: ColorConfig | Mapping[str, Any] | str | None = None,
        cache: ColorCache | None = None,
    ) -> None:
        self.config = ColorConfig.from_value(config)
        self.cache = cache if cache is not None else DEFAULT_CACHE
        self.generator = ColorGenerator(self.config)

    @property
    def category(self) -> str:
        return self.config.category

    def get_color(self, label: str) -> str:
        """Return the color for label, computing and caching it on a miss."""
        with self.cache.lock:
            color = self.cache.get(self.category, label)
            if color is not None:
                return color

            color = self._similar_color(label)
            if color is None:
                color = self.generator.color_for(label, text_hash)
                logger.debug("computed %s for %r in %r", color, label, self.category)

            self.cache.set(self.category, label, color)
            return color

    def _similar_color(self, label: str) -> str | None:
        """Color of the best-scoring cached label, if it clears the threshold.

        Ties keep the earliest label.
        """
        algorithm = self.config.algorithm
        if not algorithm.uses_similarity:
            return None

        best_score = 0.0
        best: tuple[str, str] | None = None
        for existing, color in self.cache.items(self.category):
            score = similarity_score(label, existing, algorithm)
            if best is None or score > best_score:
                best_score = score
                best = (existing, color)

        if best is None or best_score < self.config.similarity_threshold:
            return None
        logger.debug(
            "reusing color of %r for %r in %r (%s %.3f)",
            best[0],
            label,
            self.category,
            algorithm.value,
            best_score,
        )
        return best[1]

    def __repr__(self) -> str:
        return f"ColorSet(category={self.category!r}, algorithm={self.config.algorithm.value!r})"


def create_color_set(
    config: ColorConfig | Mapping[str, Any] | str | None = None,
    cache: ColorCache | None = None,
) -> ColorSet:
    """Create a color set from a category name or options mapping."""
    return ColorSet(config, cache=cache)


use_auto_color = create_color_set


def set_precomputed_colors(
    snapshot: Mapping[str, Mapping[str, str]],
    cache: ColorCache | None = None,
) -> int:
    """Merge precomputed colors into the cache before runtime lookups."""
    target = cache if cache is not None else DEFAULT_CACHE
    return target.bulk_load(snapshot)
