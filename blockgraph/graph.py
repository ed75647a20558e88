from __future__ import annotations

from collections.abc import Sized
import logging
from typing import Callable, Generic, Sequence, TypeVar

import numpy as np

from blockgraph.color import ColorChar
from blockgraph.glyphs import quadrant_glyph
from blockgraph.grid import GridPrint
from blockgraph.raster import BoolBuffer
from blockgraph.renderers import HistogramRenderer, KeyFn, ScatterRenderer
from blockgraph.style import DEFAULT_STYLE, GridStyle


LOGGER = logging.getLogger(__name__)

D = TypeVar("D")
V = TypeVar("V")

Renderer = Callable[[D, int, int], bool]

SLOW_SCATTER_POINTS = 10_000


class Graph(GridPrint, Generic[D]):
    """A simple 2D chart where every sub-pixel is either on or off.

    Each printed character packs a 2x2 block of sub-pixels into one unicode
    quadrant glyph, doubling the effective resolution in both directions. The
    ``width``/``height`` given to the factories are sub-pixel sizes; the chart
    takes ``width // 2`` by ``height // 2`` characters on screen.
    Construction renders the initial data straight away.
    """

    def __init__(
        self,
        width: int,
        height: int,
        renderer: Renderer,
        data: D,
        *,
        style: GridStyle | None = None,
    ) -> None:
        self._buf = BoolBuffer(width, height, default=False)
        self._renderer = renderer
        self._data = data
        self.style = DEFAULT_STYLE if style is None else style
        self.render()

    @classmethod
    def hist(
        cls,
        width: int,
        height: int,
        key: KeyFn,
        *,
        style: GridStyle | None = None,
    ) -> Graph[Sequence[V]]:
        """Histogram: ``key`` translates each datum into ``[0.0, 1.0)``."""
        renderer = HistogramRenderer(width=width, height=height, key=key)
        return cls(width, height, renderer, [], style=style)

    @classmethod
    def scatter(
        cls,
        width: int,
        height: int,
        hkey: KeyFn,
        vkey: KeyFn,
        *,
        style: GridStyle | None = None,
    ) -> Graph[Sequence[V]]:
        renderer = ScatterRenderer(width=width, height=height, hkey=hkey, vkey=vkey)
        return cls(width, height, renderer, [], style=style)

    @property
    def data(self) -> D:
        return self._data

    @property
    def buffer(self) -> BoolBuffer:
        return self._buf

    def render(self) -> None:
        """Recompute every sub-pixel from the current data.

        The buffer is only touched once every sub-pixel has been computed.
        """
        count = len(self._data) if isinstance(self._data, Sized) else None
        if isinstance(self._renderer, ScatterRenderer) and count is not None and count > SLOW_SCATTER_POINTS:
            LOGGER.warning("scatter render scans %d points per sub-pixel; expect a slow render", count)
        buf = self._buf
        cells = np.zeros((buf.height, buf.width), dtype=bool)
        for x in range(buf.width):
            for y in range(buf.height):
                cells[y, x] = bool(self._renderer(self._data, x, y))
        buf.load(cells)
        LOGGER.debug("rendered %dx%d graph from %s items", buf.width, buf.height, count)

    def set_data(self, data: D) -> D:
        """Replace the data and re-render, handing back the previous data."""
        previous, self._data = self._data, data
        try:
            self.render()
        except Exception:
            self._data = previous
            raise
        return previous

    def get_size(self) -> tuple[int, int]:
        return (self._buf.width // 2, self._buf.height // 2)

    def get_cell(self, x: int, y: int) -> ColorChar:
        self._check_cell(x, y)
        block = self._buf.block(x * 2, self._buf.height - (y + 1) * 2)
        return self._cell(quadrant_glyph(*block))
