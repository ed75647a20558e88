"""Quick-and-dirty charts drawn with unicode block elements in the terminal."""

from blockgraph.api import hbar, histogram, scatter_xy
from blockgraph.bars import HBar, VBar
from blockgraph.color import ColorChar, make_colorstring
from blockgraph.errors import GraphDataError
from blockgraph.graph import Graph
from blockgraph.grid import GridPrint
from blockgraph.raster import BoolBuffer
from blockgraph.renderers import HistogramRenderer, ScatterRenderer
from blockgraph.style import GridStyle

__all__ = [
    "BoolBuffer",
    "ColorChar",
    "Graph",
    "GraphDataError",
    "GridPrint",
    "GridStyle",
    "HBar",
    "HistogramRenderer",
    "ScatterRenderer",
    "VBar",
    "hbar",
    "histogram",
    "make_colorstring",
    "scatter_xy",
]
