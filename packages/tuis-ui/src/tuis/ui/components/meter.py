"""Meter component: a horizontal progress bar drawn with eighth blocks."""

from __future__ import annotations

import math
from typing import Any, Callable, Mapping

from tuis.ui.block import RenderedBlock, Span

METER_BLOCKS = " ▏▎▍▌▋▊▉█"


def meter_text(value: float = 0, max_value: float = 100, width: int = 10) -> str:
    if width <= 0:
        return ""

    percent = 0.0
    if max_value > 0:
        percent = max(0.0, min(100.0, value / max_value * 100))

    per_char = 100 / width
    chars: list[str] = []
    for i in range(width):
        char_start = i * per_char
        char_end = (i + 1) * per_char
        if percent >= char_end:
            chars.append(METER_BLOCKS[-1])
        elif percent <= char_start:
            chars.append(" ")
        else:
            frac = (percent - char_start) / per_char
            chars.append(METER_BLOCKS[math.floor(frac * 8)])
    return "".join(chars)


def render_meter(
    value: float = 0,
    max_value: float = 100,
    width: int = 10,
    hl: str | None = None,
) -> RenderedBlock:
    text = meter_text(value, max_value, width)
    if not text:
        return RenderedBlock()
    return RenderedBlock(segments=[Span(text, {"hl": hl} if hl else {})])


class Meter:
    """Meter component showing *value* out of *max_value*."""

    def __init__(
        self,
        value: float = 0,
        max_value: float = 100,
        width: int = 10,
        hl: str | None = None,
        style_fn: Callable[[str, Mapping[str, Any]], str] | None = None,
    ) -> None:
        self._value = value
        self._max_value = max_value
        self._width = width
        self._hl = hl
        self._style_fn = style_fn

    def set_value(self, value: float) -> None:
        self._value = value

    def invalidate(self) -> None:
        pass

    def build(self) -> RenderedBlock:
        return render_meter(self._value, self._max_value, self._width, self._hl)

    def render(self, width: int) -> list[str]:
        block = render_meter(
            self._value, self._max_value, min(self._width, width), self._hl
        )
        return block.lines(self._style_fn)
