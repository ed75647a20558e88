from __future__ import annotations

import unittest

import numpy as np

from blockgraph.glyphs import FULL, QUADRANTS, fill_index, quadrant_glyph, quadrant_mask
from blockgraph.raster import BoolBuffer


class BoolBufferTests(unittest.TestCase):
    def test_new_buffer_is_uniform(self) -> None:
        buf = BoolBuffer(3, 2)
        self.assertEqual((buf.width, buf.height), (3, 2))
        self.assertEqual(buf.cells.shape, (2, 3))
        self.assertFalse(buf.cells.any())
        self.assertTrue(BoolBuffer(4, 4, default=True).cells.all())

    def test_set_and_get(self) -> None:
        buf = BoolBuffer(3, 2)
        buf.set(2, 1, True)
        self.assertTrue(buf.get(2, 1))
        self.assertFalse(buf.get(1, 1))
        self.assertTrue(bool(buf.cells[1, 2]))

    def test_out_of_bounds_access_raises(self) -> None:
        buf = BoolBuffer(3, 2)
        with self.assertRaises(IndexError):
            buf.set(3, 0, True)
        with self.assertRaises(IndexError):
            buf.get(0, -1)

    def test_non_positive_size_rejected(self) -> None:
        with self.assertRaises(ValueError):
            BoolBuffer(0, 4)
        with self.assertRaises(ValueError):
            BoolBuffer(4, -1)

    def test_cells_view_is_read_only(self) -> None:
        buf = BoolBuffer(2, 2)
        with self.assertRaises(ValueError):
            buf.cells[0, 0] = True

    def test_block_reads_two_by_two(self) -> None:
        buf = BoolBuffer(4, 4)
        buf.set(2, 2, True)
        buf.set(3, 3, True)
        self.assertEqual(buf.block(2, 2), (False, True, True, False))

    def test_block_past_edge_reads_off(self) -> None:
        buf = BoolBuffer(3, 3, default=True)
        self.assertEqual(buf.block(2, 2), (False, False, True, False))

    def test_load_replaces_all_cells(self) -> None:
        buf = BoolBuffer(3, 2)
        cells = np.zeros((2, 3), dtype=bool)
        cells[1, 2] = True
        buf.load(cells)
        self.assertTrue(buf.get(2, 1))
        self.assertEqual(int(buf.cells.sum()), 1)
        with self.assertRaises(ValueError):
            buf.load(np.zeros((3, 2), dtype=bool))

    def test_fill(self) -> None:
        buf = BoolBuffer(2, 2)
        buf.fill(True)
        self.assertTrue(buf.cells.all())


class GlyphTableTests(unittest.TestCase):
    def test_quadrant_table_extremes(self) -> None:
        self.assertEqual(len(QUADRANTS), 16)
        self.assertEqual(QUADRANTS[0], " ")
        self.assertEqual(QUADRANTS[15], FULL)
        self.assertEqual(len(set(QUADRANTS)), 16)

    def test_quadrant_glyph_halves(self) -> None:
        self.assertEqual(quadrant_glyph(True, True, False, False), "▀")
        self.assertEqual(quadrant_glyph(False, False, True, True), "▄")
        self.assertEqual(quadrant_glyph(True, False, True, False), "▌")
        self.assertEqual(quadrant_glyph(False, True, False, True), "▐")

    def test_quadrant_mask_bits(self) -> None:
        self.assertEqual(quadrant_mask(False, False, False, True), 8)
        self.assertEqual(quadrant_mask(True, True, True, True), 15)

    def test_fill_index_clamps(self) -> None:
        self.assertEqual(fill_index(-3.0), 0)
        self.assertEqual(fill_index(4.5), 4)
        self.assertEqual(fill_index(40.0), 8)
        self.assertEqual(fill_index(float("nan")), 0)
        self.assertEqual(fill_index(float("inf")), 8)


if __name__ == "__main__":
    unittest.main()
