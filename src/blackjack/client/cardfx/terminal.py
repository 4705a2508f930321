# src/blackjack/client/cardfx/terminal.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List

CSI = "\033["


@dataclass
class Style:
    prefix: str = ""
    suffix: str = CSI + "0m"

    def paint(self, text: str, enabled: bool = True) -> str:
        if not enabled or not self.prefix:
            return text
        return self.prefix + text + self.suffix


# Basic styles (extend as needed)
RESET = Style(prefix="", suffix="")
BOLD = Style(prefix=CSI + "1m")

RED_BOLD = Style(prefix=CSI + "31m" + CSI + "1m")    # hearts/diamonds
GREEN_BOLD = Style(prefix=CSI + "32m" + CSI + "1m")  # player wins
YELLOW_BOLD = Style(prefix=CSI + "33m" + CSI + "1m") # push


@dataclass
class Sprite:
    lines: List[str]

    @property
    def w(self) -> int:
        return max((len(s) for s in self.lines), default=0)

    @property
    def h(self) -> int:
        return len(self.lines)


def hstack(sprites: List[Sprite], gap: int = 1) -> Sprite:
    """Place sprites side by side, top-aligned, padding short ones."""
    if not sprites:
        return Sprite([])
    height = max(s.h for s in sprites)
    spacer = " " * gap
    rows = []
    for row in range(height):
        parts = []
        for s in sprites:
            line = s.lines[row] if row < s.h else ""
            parts.append(line.ljust(s.w))
        rows.append(spacer.join(parts).rstrip())
    return Sprite(rows)
