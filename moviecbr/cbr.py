"""Similarity measures used for case-based retrieval."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Protocol, runtime_checkable


@runtime_checkable
class HasId(Protocol):
    """Anything that carries an integer identifier in ``id``."""

    @property
    def id(self) -> int: ...


def levenshtein(a: str, b: str) -> int:
    """Return the number of single-character edits that turn ``a`` into ``b``."""
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, 1):
        current = [i]
        for j, char_b in enumerate(b, 1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (char_a != char_b),
                )
            )
        previous = current
    return previous[-1]


def similarity_number(a: int, b: int, maximum: int, minimum: int) -> float:
    """Similarity of two numbers relative to the range ``minimum..maximum``.

    Identical numbers give 1.0, numbers at opposite ends of the range 0.0.
    An empty range yields NaN for equal numbers and -inf otherwise.
    """
    span = maximum - minimum
    if span < 0:
        raise ValueError(f"maximum {maximum} is below minimum {minimum}")
    diff = abs(a - b)
    if span == 0:
        return math.nan if diff == 0 else -math.inf
    return 1.0 - diff / span


def similarity_string(a: str, b: str) -> float:
    """Similarity of two strings from their edit distance.

    The distance is normalised by the UTF-8 byte length of the longer string;
    two empty strings are identical.
    """
    if not a and not b:
        return 1.0
    max_len = max(len(a.encode("utf-8")), len(b.encode("utf-8")))
    return 1.0 - levenshtein(a, b) / max_len


def similarity_id(a: Iterable[HasId], b: Iterable[HasId]) -> float:
    """Jaccard index of the identifiers in two collections; 0.0 if both are empty."""
    a_ids = {item.id for item in a}
    b_ids = {item.id for item in b}
    union = a_ids | b_ids
    if not union:
        return 0.0
    return len(a_ids & b_ids) / len(union)