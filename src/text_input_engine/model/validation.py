"""Bounds checks for host-supplied selections."""

from __future__ import annotations


def selection_fits(base: int, extent: int, length: int) -> bool:
    # Host selections arrive ordered; extent bounds base once base <= extent.
    if base < 0 or base > extent:
        return False
    return extent <= length
