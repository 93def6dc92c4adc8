"""Rendered output of the layout components.

A :class:`RenderedBlock` is an ordered list of :class:`Span` values and
``LINE_BREAK`` markers plus the key bindings attached to the whole block.
The host turns it into terminal lines with :meth:`RenderedBlock.lines` and
routes key sequences back through :meth:`RenderedBlock.trigger`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Union

from tuis.ui.utils import visible_width

# A binding receives the numeric count typed before the key sequence, if any.
Binding = Callable[[Union[int, None]], None]


@dataclass(frozen=True)
class Span:
    """A run of text on one line, with opaque display attributes."""

    text: str
    attrs: Mapping[str, Any] = field(default_factory=dict)
    bindings: Mapping[str, Binding] = field(default_factory=dict)


@dataclass(frozen=True)
class LineBreak:
    """Ends the current output line."""


LINE_BREAK = LineBreak()

Segment = Union[Span, LineBreak]


@dataclass
class RenderedBlock:
    segments: list[Segment] = field(default_factory=list)
    bindings: dict[str, Binding] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.segments

    def _line_spans(self) -> list[list[Span]]:
        if not self.segments:
            return []
        lines: list[list[Span]] = [[]]
        for seg in self.segments:
            if isinstance(seg, LineBreak):
                lines.append([])
            else:
                lines[-1].append(seg)
        return lines

    def lines(
        self, style: Callable[[str, Mapping[str, Any]], str] | None = None
    ) -> list[str]:
        """Join spans into output lines.

        *style* maps ``(text, attrs)`` to the string written for a span;
        without it the plain span text is used.
        """
        out: list[str] = []
        for spans in self._line_spans():
            if style is None:
                out.append("".join(s.text for s in spans))
            else:
                out.append("".join(style(s.text, s.attrs) for s in spans))
        return out

    def text(self) -> str:
        return "\n".join(self.lines())

    def span_at(self, line: int, column: int) -> Span | None:
        """Return the span covering display *column* of *line* (0-based)."""
        all_lines = self._line_spans()
        if not 0 <= line < len(all_lines) or column < 0:
            return None
        col = 0
        for span in all_lines[line]:
            width = visible_width(span.text)
            if col <= column < col + width:
                return span
            col += width
        return None

    def trigger(self, keys: str, count: int | None = None) -> bool:
        """Run the block binding for *keys*; return ``False`` if unbound."""
        binding = self.bindings.get(keys)
        if binding is None:
            return False
        binding(count)
        return True
