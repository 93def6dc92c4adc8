"""tuis-ui: fixed-width tables, pagination and bar widgets for terminals."""

# Rendered output
from tuis.ui.block import LINE_BREAK, LineBreak, RenderedBlock, Span

# Borders
from tuis.ui.borders import BORDER_STYLES, BorderStyle, GlyphSet, resolve_border

# Components (re-exported from components package)
from tuis.ui.components import (
    Meter,
    Row,
    Sparkline,
    TabBar,
    TabBarTab,
    Table,
    TableOptions,
    compute_column_widths,
    render_meter,
    render_sparkline,
    render_tab_bar,
    render_table,
)

# Keybindings
from tuis.ui.keybindings import (
    DEFAULT_TABLE_KEYBINDINGS,
    KeySequenceBuffer,
    TableAction,
    TableKeybindingsManager,
    get_table_keybindings,
    set_table_keybindings,
)

# Markup
from tuis.ui.markup import Node, flatten_to_plain_text, h, measure

# Pagination
from tuis.ui.pagination import (
    Controlled,
    Disabled,
    PageState,
    PageWindow,
    Uncontrolled,
    apply_navigation,
    navigate,
    resolve_pagination,
)

# Utilities
from tuis.ui.utils import pad_to_width, truncate_to_width, visible_width

__all__ = [
    # Rendered output
    "LINE_BREAK",
    "LineBreak",
    "RenderedBlock",
    "Span",
    # Borders
    "BORDER_STYLES",
    "BorderStyle",
    "GlyphSet",
    "resolve_border",
    # Components
    "Meter",
    "Row",
    "Sparkline",
    "TabBar",
    "TabBarTab",
    "Table",
    "TableOptions",
    "compute_column_widths",
    "render_meter",
    "render_sparkline",
    "render_tab_bar",
    "render_table",
    # Keybindings
    "DEFAULT_TABLE_KEYBINDINGS",
    "KeySequenceBuffer",
    "TableAction",
    "TableKeybindingsManager",
    "get_table_keybindings",
    "set_table_keybindings",
    # Markup
    "Node",
    "flatten_to_plain_text",
    "h",
    "measure",
    # Pagination
    "Controlled",
    "Disabled",
    "PageState",
    "PageWindow",
    "Uncontrolled",
    "apply_navigation",
    "navigate",
    "resolve_pagination",
    # Utilities
    "pad_to_width",
    "truncate_to_width",
    "visible_width",
]
