"""Shared helpers for the sequence algorithms."""

from __future__ import annotations

from typing import Optional, Sized


def resolve_count(data: Sized, n: Optional[int]) -> int:
    """
    Number of leading elements an algorithm should work on.

    `None` means the whole sequence. Anything outside `[0, len(data)]` is a
    caller error.
    """
    size = len(data)
    if n is None:
        return size
    if n < 0 or n > size:
        raise ValueError(f"n={n} is outside the sequence bounds [0, {size}]")
    return n


__all__ = ["resolve_count"]
