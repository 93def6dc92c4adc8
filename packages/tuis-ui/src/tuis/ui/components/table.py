"""Table component: aligned columns, optional borders and pagination.

``render_table`` is a pure function of its options (plus, in uncontrolled
mode, the :class:`~tuis.ui.pagination.PageState` passed in).  ``Table``
wraps it as a component that keeps the page state between renders and
feeds key input to the navigation bindings.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

from tuis.ui.block import LINE_BREAK, Binding, RenderedBlock, Segment, Span
from tuis.ui.borders import BorderSpec, GlyphSet, resolve_border
from tuis.ui.keybindings import (
    KeySequenceBuffer,
    TableKeybindingsManager,
    get_table_keybindings,
)
from tuis.ui.markup import Markup, measure, text_runs
from tuis.ui.pagination import (
    PageState,
    PageWindow,
    apply_navigation,
    resolve_pagination,
)
from tuis.ui.utils import center_to_width, truncate_to_width, visible_width

PADDING = 1
HEADER_RULE = "─"


@dataclass
class Row:
    """One table row; *attrs* and *bindings* apply to every cell."""

    cells: list[Markup]
    attrs: dict[str, Any] = field(default_factory=dict)
    bindings: dict[str, Binding] = field(default_factory=dict)


@dataclass
class TableOptions:
    rows: Sequence[Any] = field(default_factory=list)
    border: BorderSpec = False
    header: bool = False
    header_separator: bool = False
    page: int | None = None
    page_size: int | None = None
    on_page_changed: Callable[[int], None] | None = None


# ---------------------------------------------------------------------------
# Row coercion
# ---------------------------------------------------------------------------


def _coerce_row(row: Any) -> Row:
    if isinstance(row, Row):
        return row
    if isinstance(row, Mapping):
        cells = row.get("cells")
        if not isinstance(cells, (list, tuple)):
            raise TypeError("row mapping needs a 'cells' list")
        attrs = {k: v for k, v in row.items() if k not in ("cells", "bindings")}
        return Row(list(cells), attrs, dict(row.get("bindings") or {}))
    if isinstance(row, (list, tuple)):
        return Row(list(row))
    raise TypeError(
        f"table row must be a Row or a sequence of cells, got {type(row).__name__}"
    )


def _coerce_rows(rows: Any) -> list[Row]:
    if isinstance(rows, (str, bytes)) or not isinstance(rows, Sequence):
        raise TypeError(f"table rows must be a sequence, got {type(rows).__name__}")
    return [_coerce_row(row) for row in rows]


# ---------------------------------------------------------------------------
# Column widths
# ---------------------------------------------------------------------------


def _measure_cells(rows: Sequence[Row]) -> list[list[int]]:
    return [[measure(cell) for cell in row.cells] for row in rows]


def _widths_from(cell_widths: list[list[int]]) -> list[int]:
    num_cols = max((len(ws) for ws in cell_widths), default=0)
    col_widths = [0] * num_cols
    for ws in cell_widths:
        for ci, w in enumerate(ws):
            col_widths[ci] = max(col_widths[ci], w + PADDING)
    return col_widths


def compute_column_widths(rows: Sequence[Row | Sequence[Markup]]) -> list[int]:
    """Widest cell of each column plus one column of padding.

    Rows shorter than the widest row simply do not contribute to the
    missing columns.
    """
    return _widths_from(_measure_cells([_coerce_row(row) for row in rows]))


def _table_width(col_widths: list[int], glyphs: GlyphSet | None) -> int:
    total = sum(col_widths)
    if glyphs is not None:
        total += len(col_widths) + 1
    return total


# ---------------------------------------------------------------------------
# Pagination bar
# ---------------------------------------------------------------------------


def pagination_status(
    window: PageWindow, keybindings: TableKeybindingsManager | None = None
) -> str:
    kb = keybindings or get_table_keybindings()
    return (
        f"◀ {kb.hint('pageBackward')} Page {window.current_page} of "
        f"{window.total_pages} {kb.hint('pageForward')} ▶    "
        f"{window.end - window.start + 1} items    "
        f"({window.start}-{window.end} of {window.total_items})"
    )


def _status_bar(status: str, width: int) -> list[Segment]:
    left, right = center_to_width(status, width)
    segs: list[Segment] = []
    if left:
        segs.append(Span(" " * left))
    segs.append(Span(status, {"hl": "pagination"}))
    if right:
        segs.append(Span(" " * right))
    return segs


# ---------------------------------------------------------------------------
# render_table
# ---------------------------------------------------------------------------


def render_table(
    options: TableOptions | None = None,
    *,
    state: PageState | None = None,
    keybindings: TableKeybindingsManager | None = None,
    **kwargs: Any,
) -> RenderedBlock:
    """Lay out rows as fixed-width text.

    Options may be passed as a :class:`TableOptions`, as keyword arguments,
    or both (keywords win).  *state* carries the uncontrolled page between
    calls; without it every call starts on page 1.
    """
    if options is None:
        options = TableOptions(**kwargs)
    elif kwargs:
        options = dataclasses.replace(options, **kwargs)
    kb = keybindings or get_table_keybindings()

    all_rows = _coerce_rows(options.rows)
    if not all_rows:
        return RenderedBlock()

    glyphs = resolve_border(options.border)
    header_row = all_rows[0] if options.header else None
    data_rows = all_rows[1:] if options.header else all_rows

    window = resolve_pagination(
        len(data_rows), options.page, options.page_size, state
    )
    rows = ([header_row] if header_row is not None else []) + window.slice(data_rows)

    cell_widths = _measure_cells(rows)
    col_widths = _widths_from(cell_widths)
    num_cols = len(col_widths)

    status = ""
    display_width = 0
    if window.paginated:
        status = pagination_status(window, kb)
        status_width = visible_width(status)
        table_width = _table_width(col_widths, glyphs)
        if status_width > table_width and num_cols:
            col_widths[-1] += status_width - table_width
        display_width = max(_table_width(col_widths, glyphs), status_width)

    rule_glyph = glyphs.top if glyphs is not None else HEADER_RULE
    out: list[Segment] = []

    def add(
        text: str,
        attrs: Mapping[str, Any] | None = None,
        bindings: Mapping[str, Binding] | None = None,
    ) -> None:
        if text:
            out.append(Span(text, dict(attrs or {}), dict(bindings or {})))

    if window.paginated:
        out.extend(_status_bar(status, display_width))
        out.append(LINE_BREAK)
        add(rule_glyph * display_width)
        out.append(LINE_BREAK)
    if glyphs is not None:
        add(glyphs.hline("top", col_widths))
        out.append(LINE_BREAK)

    for ri, (row, widths) in enumerate(zip(rows, cell_widths)):
        if glyphs is not None:
            add(glyphs.left)
        for ci in range(num_cols):
            last = ci == num_cols - 1
            cell_width = 0
            if ci < len(row.cells):
                for text, attrs in text_runs(row.cells[ci], row.attrs):
                    add(text, attrs, row.bindings)
                cell_width = widths[ci]
            pad = col_widths[ci] - cell_width
            if pad > 0 and (glyphs is not None or not last):
                add(" " * pad, row.attrs, row.bindings)
            if glyphs is not None:
                add(glyphs.right if last else glyphs.mid_mid)

        if ri == 0 and header_row is not None:
            if glyphs is not None:
                out.append(LINE_BREAK)
                add(glyphs.hline("header", col_widths))
            elif options.header_separator:
                out.append(LINE_BREAK)
                add(HEADER_RULE * _table_width(col_widths, None))

        if ri < len(rows) - 1:
            out.append(LINE_BREAK)
        elif glyphs is not None:
            out.append(LINE_BREAK)
            add(glyphs.hline("bottom", col_widths))

    if not window.paginated:
        return RenderedBlock(segments=out)

    out.append(LINE_BREAK)
    add(rule_glyph * display_width)
    out.append(LINE_BREAK)
    out.extend(_status_bar(status, display_width))

    def nav(delta: int) -> Binding:
        def binding(count: int | None = None) -> None:
            apply_navigation(
                window,
                delta=delta,
                absolute=count if count else None,
                on_page_changed=options.on_page_changed,
            )

        return binding

    bindings: dict[str, Binding] = {}
    for key in kb.get_keys("pageBackward"):
        bindings[key] = nav(-1)
    for key in kb.get_keys("pageForward"):
        bindings[key] = nav(1)
    return RenderedBlock(segments=out, bindings=bindings)


# ---------------------------------------------------------------------------
# Table component
# ---------------------------------------------------------------------------


class Table:
    """Table component that owns its uncontrolled page between renders."""

    def __init__(
        self,
        options: TableOptions | None = None,
        keybindings: TableKeybindingsManager | None = None,
        style_fn: Callable[[str, Mapping[str, Any]], str] | None = None,
    ) -> None:
        self._options = options or TableOptions()
        self._keybindings = keybindings
        self._style_fn = style_fn
        self._page_state = PageState()
        self._key_buffer = KeySequenceBuffer()
        self._block: RenderedBlock | None = None

    @property
    def options(self) -> TableOptions:
        return self._options

    @property
    def page(self) -> int:
        """The page currently displayed."""
        data_count = len(self._options.rows) - (1 if self._options.header else 0)
        return resolve_pagination(
            max(0, data_count),
            self._options.page,
            self._options.page_size,
            self._page_state,
        ).current_page

    def set_options(self, options: TableOptions) -> None:
        self._options = options
        self.invalidate()

    def update(self, **changes: Any) -> None:
        """Replace individual options, e.g. ``table.update(page=2)``."""
        self.set_options(dataclasses.replace(self._options, **changes))

    def build(self) -> RenderedBlock:
        if self._block is None:
            self._block = render_table(
                self._options,
                state=self._page_state,
                keybindings=self._keybindings,
            )
        return self._block

    def invalidate(self) -> None:
        self._block = None

    def render(self, width: int) -> list[str]:
        return [
            truncate_to_width(line, width, "")
            for line in self.build().lines(self._style_fn)
        ]

    def handle_input(self, data: str) -> None:
        block = self.build()
        hit = self._key_buffer.feed(data, list(block.bindings))
        if hit is None:
            return
        keys, count = hit
        if block.trigger(keys, count):
            self.invalidate()
