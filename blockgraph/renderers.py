from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Callable, Generic, Sequence, TypeVar


V = TypeVar("V")

KeyFn = Callable[[V], float]


@dataclass(frozen=True)
class HistogramRenderer(Generic[V]):
    """Column ``x`` shows one datum as a bar filled from the bottom.

    ``key`` maps a datum into ``[0, 1)``; a sub-pixel is lit when the keyed value
    reaches the row's normalised height.
    """

    width: int
    height: int
    key: KeyFn

    def source_index(self, count: int, x: int) -> int:
        return int(count * x / self.width)

    def __call__(self, data: Sequence[V], x: int, y: int) -> bool:
        count = len(data)
        if count <= 1:
            return False
        value = self.key(data[self.source_index(count, x)])
        return value >= y / self.height


@dataclass(frozen=True)
class ScatterRenderer(Generic[V]):
    """A sub-pixel is lit when any datum floors onto it.

    Scans the whole dataset per sub-pixel, so a full render is O(width*height*N).
    Points exactly on a grid line belong to the cell above/right of it.
    """

    width: int
    height: int
    hkey: KeyFn
    vkey: KeyFn

    def cell_of(self, item: V) -> tuple[int, int] | None:
        a = self.hkey(item) * self.width
        b = self.vkey(item) * self.height
        if not (math.isfinite(a) and math.isfinite(b)):
            return None
        return math.floor(a), math.floor(b)

    def __call__(self, data: Sequence[V], x: int, y: int) -> bool:
        for item in data:
            if self.cell_of(item) == (x, y):
                return True
        return False
