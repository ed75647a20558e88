from __future__ import annotations

import numpy as np


class BoolBuffer:
    """Fixed-size sub-pixel occupancy grid.

    Stored as a ``(height, width)`` numpy array. ``y = 0`` is the bottom row of
    the chart; flipping for terminal output is left to the caller.
    """

    def __init__(self, width: int, height: int, default: bool = False) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self._cells = np.full((height, width), bool(default), dtype=bool)

    @property
    def width(self) -> int:
        return int(self._cells.shape[1])

    @property
    def height(self) -> int:
        return int(self._cells.shape[0])

    @property
    def cells(self) -> np.ndarray:
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def _check(self, x: int, y: int) -> None:
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            raise IndexError(f"sub-pixel ({x}, {y}) outside {self.width}x{self.height} buffer")

    def get(self, x: int, y: int) -> bool:
        self._check(x, y)
        return bool(self._cells[y, x])

    def set(self, x: int, y: int, value: bool) -> None:
        self._check(x, y)
        self._cells[y, x] = bool(value)

    def fill(self, value: bool) -> None:
        self._cells.fill(bool(value))

    def block(self, x: int, y: int) -> tuple[bool, bool, bool, bool]:
        """Read the 2x2 block whose lower-left sub-pixel is ``(x, y)``.

        Returns ``(upper_left, upper_right, lower_left, lower_right)``. Sub-pixels
        past the right or top edge read as off; the corner itself must be inside.
        """
        self._check(x, y)
        right = x + 1 < self.width
        upper = y + 1 < self.height
        cells = self._cells
        return (
            bool(cells[y + 1, x]) if upper else False,
            bool(cells[y + 1, x + 1]) if upper and right else False,
            bool(cells[y, x]),
            bool(cells[y, x + 1]) if right else False,
        )

    def copy_cells(self) -> np.ndarray:
        return self._cells.copy()

    def load(self, cells: np.ndarray) -> None:
        """Overwrite every sub-pixel at once from a ``(height, width)`` array."""
        if cells.shape != self._cells.shape:
            raise ValueError(f"expected shape {self._cells.shape}, got {cells.shape}")
        self._cells[...] = cells.astype(bool, copy=False)
