"""Tests for markup trees and cell measurement."""

from __future__ import annotations

import pytest

from tuis.ui.markup import (
    MAX_DEPTH,
    Node,
    fallback_text,
    flatten_to_plain_text,
    h,
    iter_text_leaves,
    measure,
    text_runs,
)


class _Opaque:
    def __str__(self) -> str:
        return "opaque"


def _nested(depth: int) -> list:
    cell: list = ["x"]
    for _ in range(depth):
        cell = [cell]
    return cell


def _cyclic() -> list:
    cell: list = ["x"]
    cell.append(cell)
    return cell


class TestH:
    def test_single_child_is_wrapped(self) -> None:
        node = h("text", {"hl": "Comment"}, "value")
        assert node == Node("text", {"hl": "Comment"}, ("value",))

    def test_list_children(self) -> None:
        node = h("text", None, ["a", "b"])
        assert node.children == ("a", "b")
        assert node.attrs == {}

    def test_no_children(self) -> None:
        assert h("text").children == ()


class TestFlattenToPlainText:
    def test_plain_string(self) -> None:
        assert flatten_to_plain_text("abc") == "abc"

    def test_nested_nodes_in_order(self) -> None:
        tree = h("text", {}, ["a", h("text", {"hl": "Bold"}, ["b", h("text", {}, "c")]), "d"])
        assert flatten_to_plain_text(tree) == "abcd"

    def test_none_renders_nothing(self) -> None:
        assert flatten_to_plain_text(["a", None, "b"]) == "ab"

    def test_numbers_use_str(self) -> None:
        assert flatten_to_plain_text([1, " ", 2.5]) == "1 2.5"

    def test_unsupported_leaf_raises(self) -> None:
        with pytest.raises(TypeError):
            flatten_to_plain_text(_Opaque())


class TestMeasure:
    def test_markup_is_stripped(self) -> None:
        assert measure(h("text", {"hl": "Comment"}, "Value1")) == 6

    def test_wide_characters(self) -> None:
        assert measure("名前") == 4

    def test_ansi_inside_leaf_does_not_count(self) -> None:
        assert measure("\x1b[1mbold\x1b[0m") == 4

    def test_falls_back_to_raw_length(self) -> None:
        assert measure(_Opaque()) == len("opaque")

    def test_empty_cell(self) -> None:
        assert measure("") == 0

    def test_cyclic_markup_measures_its_str(self) -> None:
        cell = _cyclic()
        assert measure(cell) == len(str(cell))

    def test_nesting_past_recursion_limit(self) -> None:
        cell = _nested(5000)
        width = measure(cell)
        assert width == len(fallback_text(cell))
        assert width > 0

    def test_nesting_within_limit_is_flattened(self) -> None:
        assert measure(_nested(MAX_DEPTH - 1)) == 1


class TestIterTextLeaves:
    def test_attributes_merge_inner_wins(self) -> None:
        tree = h("text", {"hl": "Outer", "x": 1}, ["a", h("text", {"hl": "Inner"}, "b")])
        assert list(iter_text_leaves(tree, {"row": True})) == [
            ("a", {"row": True, "hl": "Outer", "x": 1}),
            ("b", {"row": True, "hl": "Inner", "x": 1}),
        ]

    def test_shared_subtree_is_not_a_cycle(self) -> None:
        shared = h("text", {}, "s")
        assert flatten_to_plain_text([shared, shared]) == "ss"

    def test_cycle_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            flatten_to_plain_text(_cyclic())

    def test_too_deep_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            flatten_to_plain_text(_nested(MAX_DEPTH + 10))


class TestTextRuns:
    def test_one_run_per_non_empty_leaf(self) -> None:
        runs = text_runs(["a", "", h("text", {"hl": "Bold"}, "b"), None])
        assert runs == [("a", {}), ("b", {"hl": "Bold"})]

    def test_unwalkable_cell_becomes_one_fallback_run(self) -> None:
        assert text_runs(_Opaque(), {"hl": "Row"}) == [("opaque", {"hl": "Row"})]

    def test_fallback_matches_measure(self) -> None:
        cell = _nested(5000)
        [(text, _)] = text_runs(cell)
        assert len(text) == measure(cell)


class TestFallbackText:
    def test_uses_str(self) -> None:
        assert fallback_text(_Opaque()) == "opaque"

    def test_failing_str_uses_limited_repr(self) -> None:
        class Broken:
            def __str__(self) -> str:
                raise RuntimeError("no")

        assert fallback_text(Broken()).startswith("<")
