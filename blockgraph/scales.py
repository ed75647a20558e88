from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Callable

import numpy as np

from blockgraph.errors import GraphDataError


# Largest float below 1.0; keys stay inside [0, 1) so the top value still lands on the grid.
UNIT_MAX = float(np.nextafter(1.0, 0.0))
# Key value for missing data. Below every row and column, so never drawn.
OFF_GRID = -1.0


def coerce_1d(value: Any, *, label: str = "values") -> np.ndarray:
    """Turn a sequence or 1-D array into float64, with ``None`` as NaN."""
    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise GraphDataError(f"{label} must be 1-D")
        arr = value
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        arr = np.asarray(value, dtype=object)
    else:
        raise GraphDataError(f"unsupported {label} input type: {type(value)!r}")

    if arr.size == 0:
        raise GraphDataError(f"{label} is empty")
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    try:
        return np.asarray([np.nan if raw is None else float(raw) for raw in arr.tolist()], dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise GraphDataError(f"{label} contains non-numeric values") from exc


def data_range(values: np.ndarray) -> tuple[float, float]:
    """Min and max over the finite values; a flat series is widened by 1 each way."""
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        raise GraphDataError("series contains no finite values")
    lo = float(np.min(finite))
    hi = float(np.max(finite))
    if lo == hi:
        lo -= 1.0
        hi += 1.0
    return lo, hi


def unit_key(lo: float, hi: float, *, clip: bool = True) -> Callable[[Any], float]:
    """Key function mapping ``[lo, hi]`` linearly onto ``[0, 1)``.

    With ``clip`` out-of-range values saturate at the edges; without it they
    map to ``OFF_GRID``. ``hi`` itself always lands just below 1.
    """
    if not (np.isfinite(lo) and np.isfinite(hi)) or hi <= lo:
        raise ValueError(f"invalid range: [{lo}, {hi}]")
    span = hi - lo

    def key(value: Any) -> float:
        v = float(value)
        if not np.isfinite(v):
            return OFF_GRID
        t = (v - lo) / span
        if not clip and (t < 0.0 or t > 1.0):
            return OFF_GRID
        return min(UNIT_MAX, max(0.0, t))

    return key
