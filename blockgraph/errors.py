from __future__ import annotations


class GraphDataError(ValueError):
    """Raised when input data cannot be turned into a chart."""
