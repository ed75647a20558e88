from __future__ import annotations

import math
from typing import Any

from blockgraph.bars import HBar
from blockgraph.errors import GraphDataError
from blockgraph.graph import Graph
from blockgraph.scales import coerce_1d, data_range, unit_key
from blockgraph.style import GridStyle


DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24


def histogram(
    values: Any,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    *,
    limits: tuple[float, float] | None = None,
    style: GridStyle | None = None,
) -> Graph:
    arr = coerce_1d(values, label="values")
    lo, hi = data_range(arr) if limits is None else limits
    graph = Graph.hist(width, height, unit_key(lo, hi), style=style)
    graph.set_data(arr)
    return graph


def scatter_xy(
    xs: Any,
    ys: Any,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    *,
    xlimits: tuple[float, float] | None = None,
    ylimits: tuple[float, float] | None = None,
    style: GridStyle | None = None,
) -> Graph:
    x_arr = coerce_1d(xs, label="x")
    y_arr = coerce_1d(ys, label="y")
    if x_arr.shape != y_arr.shape:
        raise GraphDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")

    xkey = unit_key(*(data_range(x_arr) if xlimits is None else xlimits), clip=False)
    ykey = unit_key(*(data_range(y_arr) if ylimits is None else ylimits), clip=False)
    graph = Graph.scatter(
        width,
        height,
        lambda point: xkey(point[0]),
        lambda point: ykey(point[1]),
        style=style,
    )
    graph.set_data(list(zip(x_arr.tolist(), y_arr.tolist())))
    return graph


def hbar(value: float, width: int = 40, *, style: GridStyle | None = None) -> HBar:
    v = float(value)
    if math.isnan(v):
        v = 0.0
    return HBar(width, max(0.0, min(1.0, v)), style=style)
