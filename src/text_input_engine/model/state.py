"""Selection endpoints and the directional cursor, as plain offsets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Span = Tuple[int, int]  # (start, end), start <= end


@dataclass(slots=True)
class SelectionState:
    """Unordered base/extent pair plus the endpoint last moved by an extend.

    ``cursor`` always equals ``base`` or ``extent``; the model keeps it that
    way after each operation.
    """

    base: int = 0
    extent: int = 0
    cursor: int = 0

    @property
    def is_active(self) -> bool:
        return self.base != self.extent

    @property
    def span(self) -> Span:
        return (min(self.base, self.extent), max(self.base, self.extent))

    def collapse(self, position: int) -> None:
        self.base = position
        self.extent = position
        self.cursor = position

    def select(self, base: int, extent: int) -> None:
        self.base = base
        self.extent = extent
        self.cursor = extent


__all__ = ["SelectionState", "Span"]
