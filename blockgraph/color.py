from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


ESC = "\033["
RESET = "\033[0m"

DEFAULT_FOREGROUND = 0xE7
DEFAULT_BACKGROUND = 0x10


@dataclass(frozen=True)
class ColorChar:
    """One terminal cell: xterm-256 foreground, xterm-256 background and a glyph."""

    fg: int
    bg: int
    char: str

    def __post_init__(self) -> None:
        if not 0 <= self.fg <= 255 or not 0 <= self.bg <= 255:
            raise ValueError("fg/bg must be xterm-256 palette indices in [0, 255]")
        if len(self.char) != 1:
            raise ValueError(f"ColorChar holds exactly one character, got {self.char!r}")


def switch_color(fg: int | None = None, bg: int | None = None) -> str:
    """ANSI control code that switches to the given palette colours."""
    fgcode = f"{ESC}38;5;{fg}m" if fg is not None else ""
    bgcode = f"{ESC}48;5;{bg}m" if bg is not None else ""
    return fgcode + bgcode


def reset_color() -> str:
    return RESET


def make_colorstring(chars: Iterable[ColorChar], *, use_color: bool = True) -> str:
    """Join cells into one printable line.

    Colour codes are only emitted when the pair changes from the previous cell,
    and a coloured line always ends with a reset.
    """
    if not use_color:
        return "".join(c.char for c in chars)

    parts: list[str] = []
    current: tuple[int, int] | None = None
    for c in chars:
        pair = (c.fg, c.bg)
        if pair != current:
            parts.append(switch_color(c.fg, c.bg))
            current = pair
        parts.append(c.char)
    if current is not None:
        parts.append(RESET)
    return "".join(parts)
