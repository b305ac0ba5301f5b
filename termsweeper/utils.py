"""Shared random source and fixed-length list helpers."""

from __future__ import annotations

import random
from typing import MutableSequence, TypeVar

T = TypeVar("T")

_RNG = random.Random()


def get_rng() -> random.Random:
    """The process-wide random generator, seeded from system entropy."""
    return _RNG


def insert_and_drop_last(items: MutableSequence[T], index: int, value: T) -> None:
    """Insert ``value`` at ``index`` keeping the length fixed by dropping the last item.

    Out-of-range indices leave the sequence unchanged.
    """
    if index < 0 or index >= len(items):
        return
    items.insert(index, value)
    items.pop()