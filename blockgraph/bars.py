from __future__ import annotations

from blockgraph.color import ColorChar
from blockgraph.glyphs import HBLOCKS, VBLOCKS, fill_index
from blockgraph.grid import GridPrint
from blockgraph.style import DEFAULT_STYLE, GridStyle


class HBar(GridPrint):
    """A single horizontal bar, eight fill levels per character.

    Usable as one line of a horizontal bar chart.
    """

    def __init__(self, width: int, value: float, *, style: GridStyle | None = None) -> None:
        if width <= 0:
            raise ValueError("width must be > 0")
        self._width = width
        self._value = float(value)
        self.style = DEFAULT_STYLE if style is None else style

    @property
    def width(self) -> int:
        return self._width

    @property
    def value(self) -> float:
        """Fraction of the bar that is filled, nominally 0.0 to 1.0."""
        return self._value

    def __repr__(self) -> str:
        return f"HBar(width={self._width}, value={self._value})"

    def get_size(self) -> tuple[int, int]:
        return (self._width, 1)

    def get_cell(self, x: int, y: int) -> ColorChar:
        self._check_cell(x, y)
        index = fill_index(9.0 * (self._value * self._width - x))
        return self._cell(HBLOCKS[index])


class VBar(GridPrint):
    """A single vertical bar growing upwards from the last output row."""

    def __init__(self, height: int, value: float, *, style: GridStyle | None = None) -> None:
        if height <= 0:
            raise ValueError("height must be > 0")
        self._height = height
        self._value = float(value)
        self.style = DEFAULT_STYLE if style is None else style

    @property
    def height(self) -> int:
        return self._height

    @property
    def value(self) -> float:
        return self._value

    def __repr__(self) -> str:
        return f"VBar(height={self._height}, value={self._value})"

    def get_size(self) -> tuple[int, int]:
        return (1, self._height)

    def get_cell(self, x: int, y: int) -> ColorChar:
        self._check_cell(x, y)
        level = self._height - 1 - y
        index = fill_index(9.0 * (self._value * self._height - level))
        return self._cell(VBLOCKS[index])
