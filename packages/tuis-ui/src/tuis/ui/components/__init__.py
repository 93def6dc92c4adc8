"""Layout components."""

from tuis.ui.components.meter import Meter, render_meter
from tuis.ui.components.sparkline import Sparkline, render_sparkline
from tuis.ui.components.tab_bar import TabBar, TabBarTab, render_tab_bar
from tuis.ui.components.table import (
    Row,
    Table,
    TableOptions,
    compute_column_widths,
    render_table,
)

__all__ = [
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
]
