"""Tests for the Sparkline component."""

from __future__ import annotations

from tuis.ui.components.sparkline import Sparkline, render_sparkline, sparkline_text
from tuis.ui.utils import visible_width


class TestSparklineText:
    def test_empty_values(self) -> None:
        assert sparkline_text([], 10) == " " * 10

    def test_single_max_value(self) -> None:
        assert sparkline_text([100], 5) == "    █"

    def test_auto_scales(self) -> None:
        assert sparkline_text([0, 50, 100], 3) == " ▄█"

    def test_varying_heights(self) -> None:
        assert sparkline_text([25, 50, 75, 100], 4) == "▂▄▆█"

    def test_keeps_last_values(self) -> None:
        assert sparkline_text([10, 20, 30, 40, 50, 60], 3) == "▆▇█"

    def test_pads_on_the_left(self) -> None:
        text = sparkline_text([50, 100], 5)
        assert text == "   ▄█"
        assert visible_width(text) == 5

    def test_all_zero(self) -> None:
        assert sparkline_text([0, 0, 0, 0], 4) == "    "

    def test_small_values_still_visible(self) -> None:
        assert sparkline_text([1, 1000], 2) == "▁█"

    def test_zero_width(self) -> None:
        assert sparkline_text([1, 2], 0) == ""


class TestRenderSparkline:
    def test_highlight_attribute(self) -> None:
        block = render_sparkline([50, 100], 5, hl="DiagnosticWarn")
        assert block.lines() == ["   ▄█"]
        assert block.span_at(0, 0).attrs == {"hl": "DiagnosticWarn"}  # type: ignore[union-attr]

    def test_default_width(self) -> None:
        assert visible_width(render_sparkline([1]).text()) == 20


class TestSparklineComponent:
    def test_push_keeps_bounded_history(self) -> None:
        spark = Sparkline(width=3)
        for v in (1, 2, 3, 4, 8):
            spark.push(v)
        assert spark.render(80) == [sparkline_text([3, 4, 8], 3)]

    def test_render_shrinks_to_viewport(self) -> None:
        spark = Sparkline([1, 2, 3, 4], width=4)
        assert spark.render(2) == [sparkline_text([1, 2, 3, 4], 2)]

    def test_render_applies_style_fn(self) -> None:
        spark = Sparkline(
            [50, 100], width=5, hl="DiagnosticWarn", style_fn=lambda text, attrs: f"<{attrs['hl']}>{text}"
        )
        assert spark.render(80) == ["<DiagnosticWarn>   ▄█"]
