"""Sparkline component: recent values as a one-line bar graph."""

from __future__ import annotations

import math
from typing import Any, Callable, Mapping, Sequence

from tuis.ui.block import RenderedBlock, Span

SPARKLINE_BLOCKS = " ▁▂▃▄▅▆▇█"


def sparkline_text(values: Sequence[float], width: int = 20) -> str:
    """Scale *values* to the largest one and keep the last *width* of them.

    Fewer values than *width* are right-aligned; zero draws as a blank.
    """
    if width <= 0:
        return ""

    max_val = max([0, *values]) or 1
    shown = list(values[-width:]) if values else []

    chars = [" "] * (width - len(shown))
    for val in shown:
        if val == 0:
            chars.append(" ")
        else:
            idx = max(1, min(8, math.ceil(val / max_val * 8)))
            chars.append(SPARKLINE_BLOCKS[idx])
    return "".join(chars)


def render_sparkline(
    values: Sequence[float],
    width: int = 20,
    hl: str | None = None,
) -> RenderedBlock:
    text = sparkline_text(values, width)
    if not text:
        return RenderedBlock()
    return RenderedBlock(segments=[Span(text, {"hl": hl} if hl else {})])


class Sparkline:
    """Sparkline component over a growing history of values."""

    def __init__(
        self,
        values: Sequence[float] | None = None,
        width: int = 20,
        hl: str | None = None,
        style_fn: Callable[[str, Mapping[str, Any]], str] | None = None,
    ) -> None:
        self._values: list[float] = list(values or [])
        self._width = width
        self._hl = hl
        self._style_fn = style_fn

    def push(self, value: float) -> None:
        """Append a sample, keeping no more history than can be drawn."""
        self._values.append(value)
        if len(self._values) > self._width:
            del self._values[: len(self._values) - self._width]

    def invalidate(self) -> None:
        pass

    def build(self) -> RenderedBlock:
        return render_sparkline(self._values, self._width, self._hl)

    def render(self, width: int) -> list[str]:
        block = render_sparkline(self._values, min(self._width, width), self._hl)
        return block.lines(self._style_fn)
