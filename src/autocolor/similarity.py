"""String similarity scores used for near-duplicate label detection."""

from __future__ import annotations

import math
from collections import Counter
from enum import Enum


class Algorithm(str, Enum):
    """How a color set decides whether a new label matches a known one."""

    HASH = "hash"
    LEVENSHTEIN = "levenshtein"
    COSINE = "cosine"
    JACCARD = "jaccard"

    @classmethod
    def parse(cls, value: str | Algorithm | None) -> Algorithm | None:
        """Return the matching algorithm, or None if the name is unrecognized."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None

    @property
    def uses_similarity(self) -> bool:
        return self is not Algorithm.HASH


def levenshtein_distance(a: str, b: str) -> int:
    """Classic edit distance with unit costs."""
    # One row of the (len(b)+1) x (len(a)+1) grid at a time.
    previous = list(range(len(a) + 1))
    for i in range(1, len(b) + 1):
        current = [i] + [0] * len(a)
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                current[j] = previous[j - 1]
            else:
                current[j] = min(
                    previous[j - 1] + 1,  # substitution
                    current[j - 1] + 1,  # insertion
                    previous[j] + 1,  # deletion
                )
        previous = current
    return previous[len(a)]


def levenshtein_similarity(a: str, b: str) -> float:
    """Edit distance scaled to [0, 1], where 1 means identical.

    Two empty strings are identical.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1 - levenshtein_distance(a, b) / longest


def cosine_similarity(a: str, b: str) -> float:
    """Cosine of the character-frequency vectors. 0 if either string is empty."""
    freq_a = Counter(a)
    freq_b = Counter(b)
    dot = 0
    mag_a = 0
    mag_b = 0
    for char in freq_a.keys() | freq_b.keys():
        fa = freq_a[char]
        fb = freq_b[char]
        dot += fa * fb
        mag_a += fa * fa
        mag_b += fb * fb
    if mag_a == 0 or mag_b == 0:
        return 0.0
    return dot / (math.sqrt(mag_a) * math.sqrt(mag_b))


def jaccard_similarity(a: str, b: str) -> float:
    """Overlap of the distinct character sets. 0 if both strings are empty."""
    set_a = set(a)
    set_b = set(b)
    union = set_a | set_b
    if not union:
        return 0.0
    return len(set_a & set_b) / len(union)


_SCORERS = {
    Algorithm.LEVENSHTEIN: levenshtein_similarity,
    Algorithm.COSINE: cosine_similarity,
    Algorithm.JACCARD: jaccard_similarity,
}


def similarity_score(a: str, b: str, algorithm: str | Algorithm) -> float:
    """Score a and b with the named algorithm.

    Anything that is not levenshtein, cosine or jaccard (including "hash")
    scores 0 rather than raising.
    """
    scorer = _SCORERS.get(Algorithm.parse(algorithm))
    if scorer is None:
        return 0.0
    return scorer(a, b)
