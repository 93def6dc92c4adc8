"""Markup trees for cell content.

A cell is either plain text or a small tree of :class:`Node` values that
carry display attributes (``hl`` and friends).  Layout only needs the
flattened text of a tree (:func:`flatten_to_plain_text`, :func:`measure`);
output keeps the styling of each leaf through :func:`text_runs`.
"""

from __future__ import annotations

import logging
import reprlib
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Sequence, Union

from tuis.ui.utils import visible_width

logger = logging.getLogger(__name__)

MAX_DEPTH = 256

_END = object()


@dataclass(frozen=True)
class Node:
    """One markup element: a tag, its attributes and its children."""

    tag: str
    attrs: Mapping[str, Any] = field(default_factory=dict)
    children: tuple["Markup", ...] = ()


Markup = Union[str, int, float, Node, Sequence["Markup"], None]


def h(
    tag: str,
    attrs: Mapping[str, Any] | None = None,
    children: Markup = None,
) -> Node:
    """Build a :class:`Node`.

    *children* may be a single child or a list of them::

        h("text", {"hl": "Comment"}, "value")
        h("text", {}, ["a", h("text", {"hl": "Bold"}, "b")])
    """
    if children is None:
        kids: tuple[Markup, ...] = ()
    elif isinstance(children, (list, tuple)):
        kids = tuple(children)
    else:
        kids = (children,)
    return Node(tag=tag, attrs=dict(attrs or {}), children=kids)


def flatten_to_plain_text(cell: Markup) -> str:
    """Concatenate every text leaf of *cell* in document order.

    Raises ``TypeError`` for leaves that are not text, numbers, nodes or
    sequences of those, and ``ValueError`` for cyclic or overly deep trees.
    """
    return "".join(text for text, _ in iter_text_leaves(cell))


def iter_text_leaves(
    cell: Markup, attrs: Mapping[str, Any] | None = None
) -> Iterator[tuple[str, dict[str, Any]]]:
    """Yield ``(text, attrs)`` for each text leaf of *cell* in document order.

    Each leaf carries *attrs* merged with the attributes of every enclosing
    :class:`Node`, inner nodes winning.  The walk uses an explicit stack, so
    deep trees fail with ``ValueError`` instead of exhausting the
    interpreter's recursion limit.
    """
    stack: list[tuple[Iterator[Any], dict[str, Any], int | None]] = [
        (iter((cell,)), dict(attrs or {}), None)
    ]
    open_ids: set[int] = set()
    while stack:
        children, inherited, owner = stack[-1]
        child = next(children, _END)
        if child is _END:
            stack.pop()
            if owner is not None:
                open_ids.discard(owner)
            continue
        if child is None:
            continue
        if isinstance(child, str):
            yield child, inherited
            continue
        if isinstance(child, (int, float)):
            yield str(child), inherited
            continue

        if isinstance(child, Node):
            kids: Sequence[Any] = child.children
            merged = {**inherited, **child.attrs}
        elif isinstance(child, (list, tuple)):
            kids = child
            merged = inherited
        else:
            raise TypeError(f"unsupported markup leaf: {type(child).__name__}")

        if id(child) in open_ids:
            raise ValueError("markup contains itself")
        if len(stack) > MAX_DEPTH:
            raise ValueError(f"markup nested deeper than {MAX_DEPTH} levels")
        open_ids.add(id(child))
        stack.append((iter(kids), merged, id(child)))


def fallback_text(cell: Any) -> str:
    """``str(cell)``, or a size-limited repr when even that fails."""
    try:
        return str(cell)
    except Exception:
        logger.debug("str() failed for %s cell", type(cell).__name__, exc_info=True)
        return reprlib.repr(cell)


def measure(cell: Markup) -> int:
    """Return the number of terminal columns *cell* occupies.

    Never raises: content that cannot be flattened is measured by the
    character count of :func:`fallback_text`.
    """
    try:
        return visible_width(flatten_to_plain_text(cell))
    except Exception:
        logger.debug(
            "falling back to raw length for %s cell", type(cell).__name__, exc_info=True
        )
        return len(fallback_text(cell))


def text_runs(
    cell: Markup, attrs: Mapping[str, Any] | None = None
) -> list[tuple[str, dict[str, Any]]]:
    """Styled text runs of *cell*, as :func:`iter_text_leaves` yields them.

    A cell that cannot be walked becomes a single run of
    :func:`fallback_text` carrying *attrs*, matching what :func:`measure`
    counted for it.
    """
    try:
        return [(text, a) for text, a in iter_text_leaves(cell, attrs) if text]
    except Exception:
        return [(fallback_text(cell), dict(attrs or {}))]
