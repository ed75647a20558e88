from __future__ import annotations

from abc import ABC, abstractmethod
import sys
from typing import IO, Iterator

from blockgraph.color import ColorChar, make_colorstring
from blockgraph.style import DEFAULT_STYLE, GridStyle


class GridPrint(ABC):
    """Anything that can be shown as a grid of coloured characters.

    Row 0 is the top line of the output and row indices grow downwards.
    """

    style: GridStyle = DEFAULT_STYLE

    @abstractmethod
    def get_size(self) -> tuple[int, int]:
        """Return ``(columns, rows)``. ``get_cell`` must stay within these bounds."""
        raise NotImplementedError

    @abstractmethod
    def get_cell(self, x: int, y: int) -> ColorChar:
        raise NotImplementedError

    def _check_cell(self, x: int, y: int) -> None:
        cols, rows = self.get_size()
        if x < 0 or x >= cols or y < 0 or y >= rows:
            raise IndexError(f"cell ({x}, {y}) outside {cols}x{rows} grid")

    def _cell(self, glyph: str) -> ColorChar:
        return ColorChar(self.style.foreground, self.style.background, glyph)

    def rows(self, *, use_color: bool | None = None) -> Iterator[str]:
        colored = self.style.use_color if use_color is None else use_color
        width, height = self.get_size()
        for y in range(height):
            yield make_colorstring((self.get_cell(x, y) for x in range(width)), use_color=colored)

    def render_text(self, *, use_color: bool | None = None) -> str:
        return "\n".join(self.rows(use_color=use_color))

    def print(self, file: IO[str] | None = None, *, use_color: bool | None = None) -> None:
        out = sys.stdout if file is None else file
        for line in self.rows(use_color=use_color):
            out.write(line + "\n")
