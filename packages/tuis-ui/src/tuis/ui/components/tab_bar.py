"""TabBar component: a row of labelled tabs with key hints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence

from tuis.ui.block import LINE_BREAK, Binding, RenderedBlock, Segment, Span
from tuis.ui.keybindings import KeySequenceBuffer
from tuis.ui.utils import truncate_to_width


@dataclass(frozen=True)
class TabBarTab:
    key: str
    page: str
    label: str


def _select_binding(on_select: Callable[[str], None], page: str) -> Binding:
    def binding(count: int | None = None) -> None:
        on_select(page)

    return binding


def render_tab_bar(
    tabs: Sequence[TabBarTab],
    active_page: str,
    on_select: Callable[[str], None] | None = None,
    wrap_at: int | None = None,
    separator: str = " | ",
) -> RenderedBlock:
    """Lay tabs out as ``Label key`` pairs, *wrap_at* per line.

    The bar always ends with a blank line.  With *on_select*, each tab's
    key becomes a block binding and ``enter`` on a tab selects it.
    """
    if wrap_at is None:
        wrap_at = len(tabs)

    out: list[Segment] = []
    bindings: dict[str, Binding] = {}
    on_line = 0

    for i, tab in enumerate(tabs):
        if i > 0:
            if on_line >= wrap_at:
                out.append(LINE_BREAK)
                on_line = 0
            else:
                out.append(Span(separator))

        tab_bindings: dict[str, Binding] = {}
        if on_select is not None:
            select = _select_binding(on_select, tab.page)
            tab_bindings["enter"] = select
            bindings[tab.key] = select

        hl = "active" if tab.page == active_page else "inactive"
        out.append(Span(tab.label, {"hl": hl}, tab_bindings))
        out.append(Span(" " + tab.key, {"hl": "key_hint"}, tab_bindings))
        on_line += 1

    out.extend([LINE_BREAK, LINE_BREAK])
    return RenderedBlock(segments=out, bindings=bindings)


class TabBar:
    """TabBar component; ``handle_input`` selects a tab by its key."""

    def __init__(
        self,
        tabs: Sequence[TabBarTab],
        active_page: str,
        wrap_at: int | None = None,
        separator: str = " | ",
        style_fn: Callable[[str, Mapping[str, Any]], str] | None = None,
    ) -> None:
        self._tabs = list(tabs)
        self._active_page = active_page
        self._wrap_at = wrap_at
        self._separator = separator
        self._style_fn = style_fn
        self._key_buffer = KeySequenceBuffer()

        self.on_select: Callable[[str], None] | None = None

    @property
    def active_page(self) -> str:
        return self._active_page

    def set_active_page(self, page: str) -> None:
        self._active_page = page

    def invalidate(self) -> None:
        pass

    def build(self) -> RenderedBlock:
        return render_tab_bar(
            self._tabs,
            self._active_page,
            on_select=self._select,
            wrap_at=self._wrap_at,
            separator=self._separator,
        )

    def render(self, width: int) -> list[str]:
        return [
            truncate_to_width(line, width, "")
            for line in self.build().lines(self._style_fn)
        ]

    def handle_input(self, data: str) -> None:
        block = self.build()
        hit = self._key_buffer.feed(data, list(block.bindings))
        if hit is not None:
            block.trigger(hit[0])

    def _select(self, page: str) -> None:
        self._active_page = page
        if self.on_select:
            self.on_select(page)
