from __future__ import annotations

from dataclasses import dataclass
import os

from blockgraph.color import DEFAULT_BACKGROUND, DEFAULT_FOREGROUND


@dataclass(frozen=True)
class GridStyle:
    """Output settings shared by every printable grid."""

    foreground: int = DEFAULT_FOREGROUND
    background: int = DEFAULT_BACKGROUND
    use_color: bool = True

    def __post_init__(self) -> None:
        if not 0 <= self.foreground <= 255 or not 0 <= self.background <= 255:
            raise ValueError("foreground/background must be in [0, 255]")

    @classmethod
    def detect_terminal(cls, environ: dict[str, str] | None = None) -> GridStyle:
        """Guess colour support from ``NO_COLOR`` and ``TERM``."""
        env = os.environ if environ is None else environ
        term = env.get("TERM", "").lower()
        no_color = bool(env.get("NO_COLOR"))
        is_dumb = term in ("dumb", "unknown")
        return cls(use_color=not (no_color or is_dumb))


DEFAULT_STYLE = GridStyle()
