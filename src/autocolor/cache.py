"""Two-level category -> label -> color store."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping

logger = logging.getLogger(__name__)


class ColorCache:
    """Memoized colors, partitioned by category.

    Within a category, labels keep their insertion order; similarity search
    scans them in that order. Entries are never removed by the engine. The
    only writer besides the engine is bulk_load.

    ``lock`` is reentrant and guards every read-modify-write sequence, so a
    color set can hold it across a whole resolve.
    """

    def __init__(self) -> None:
        self._entries: dict[str, dict[str, str]] = {}
        self.lock = threading.RLock()

    def get(self, category: str, label: str) -> str | None:
        with self.lock:
            labels = self._entries.get(category)
            if labels is None:
                return None
            return labels.get(label)

    def set(self, category: str, label: str, color: str) -> None:
        with self.lock:
            self._entries.setdefault(category, {})[label] = color

    def items(self, category: str) -> list[tuple[str, str]]:
        """(label, color) pairs for a category, in insertion order."""
        with self.lock:
            return list(self._entries.get(category, {}).items())

    def labels(self, category: str) -> list[str]:
        with self.lock:
            return list(self._entries.get(category, {}))

    def categories(self) -> list[str]:
        with self.lock:
            return list(self._entries)

    def bulk_load(self, snapshot: Mapping[str, Mapping[str, str]]) -> int:
        """Merge a category -> label -> color snapshot, overwriting its keys.

        Entries not named in the snapshot are left alone. Color strings are
        stored as given. Returns the number of entries written.
        """
        count = 0
        with self.lock:
            for category, colors in snapshot.items():
                target = self._entries.setdefault(category, {})
                for label, color in colors.items():
                    target[label] = color
                    count += 1
        logger.debug("bulk loaded %d colors across %d categories", count, len(snapshot))
        return count

    def snapshot(self) -> dict[str, dict[str, str]]:
        """Deep copy of the current entries."""
        with self.lock:
            return {category: dict(labels) for category, labels in self._entries.items()}

    def clear(self) -> None:
        with self.lock:
            self._entries.clear()

    def __contains__(self, key: tuple[str, str]) -> bool:
        category, label = key
        return self.get(category, label) is not None

    def __len__(self) -> int:
        with self.lock:
            return sum(len(labels) for labels in self._entries.values())

    def __iter__(self) -> Iterator[tuple[str, str, str]]:
        for category, labels in self.snapshot().items():
            for label, color in labels.items():
                yield category, label, color


# Process-wide store shared by color sets that aren't given their own.
DEFAULT_CACHE = ColorCache()
