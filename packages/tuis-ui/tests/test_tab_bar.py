"""Tests for the TabBar component."""

from __future__ import annotations

from tuis.ui.components.tab_bar import TabBar, TabBarTab, render_tab_bar

TABS = [
    TabBarTab(key="g1", page="containers", label="Containers"),
    TabBarTab(key="g2", page="images", label="Images"),
    TabBarTab(key="g3", page="volumes", label="Volumes"),
    TabBarTab(key="g4", page="networks", label="Networks"),
]


class TestRenderTabBar:
    def test_single_line_by_default(self) -> None:
        block = render_tab_bar(TABS, "containers")
        assert block.lines() == [
            "Containers g1 | Images g2 | Volumes g3 | Networks g4",
            "",
            "",
        ]

    def test_active_tab_attribute(self) -> None:
        block = render_tab_bar(TABS, "images")
        assert block.span_at(0, 0).attrs == {"hl": "inactive"}  # type: ignore[union-attr]
        col = len("Containers g1 | ")
        assert block.span_at(0, col).attrs == {"hl": "active"}  # type: ignore[union-attr]

    def test_wraps_after_wrap_at(self) -> None:
        lines = render_tab_bar(TABS, "containers", wrap_at=2).lines()
        assert lines == ["Containers g1 | Images g2", "Volumes g3 | Networks g4", "", ""]

    def test_wrap_at_three(self) -> None:
        lines = render_tab_bar(TABS, "volumes", wrap_at=3).lines()
        assert len(lines) == 4
        assert "Volumes" in lines[0]
        assert lines[1] == "Networks g4"

    def test_many_tabs(self) -> None:
        tabs = [TabBarTab(f"g{i}", f"tab{i}", f"Tab{i}") for i in range(1, 7)]
        lines = render_tab_bar(tabs, "tab1", wrap_at=2).lines()
        assert len(lines) == 5
        assert lines[2] == "Tab5 g5 | Tab6 g6"

    def test_custom_separator(self) -> None:
        text = render_tab_bar(TABS, "containers", separator=" :: ").text()
        assert " :: " in text
        assert " | " not in text

    def test_single_tab(self) -> None:
        text = render_tab_bar([TabBarTab("g1", "home", "Home")], "home").text()
        assert text == "Home g1\n\n"

    def test_empty_tabs(self) -> None:
        assert render_tab_bar([], "").text() == "\n\n"

    def test_no_bindings_without_on_select(self) -> None:
        assert render_tab_bar(TABS, "containers").bindings == {}

    def test_on_select_bindings(self) -> None:
        selected: list[str] = []
        block = render_tab_bar(TABS, "containers", on_select=selected.append)
        assert set(block.bindings) == {"g1", "g2", "g3", "g4"}
        block.trigger("g3")
        span = block.span_at(0, len("Containers g1 | "))
        assert span is not None
        span.bindings["enter"](None)
        assert selected == ["volumes", "images"]


class TestTabBarComponent:
    def test_handle_input_selects_tab(self) -> None:
        selected: list[str] = []
        bar = TabBar(TABS, "containers")
        bar.on_select = selected.append
        bar.handle_input("g")
        bar.handle_input("2")
        assert selected == ["images"]
        assert bar.active_page == "images"

    def test_render_truncates(self) -> None:
        lines = TabBar(TABS, "containers").render(20)
        assert lines[0] == "Containers g1 | Imag"
        assert lines[1:] == ["", ""]
