"""Pagination state for tables.

The mode is resolved once per render into one of three values:

* :class:`Controlled` - the caller passes ``page`` every render and is told
  about navigation through ``on_page_changed``;
* :class:`Uncontrolled` - the component owns a :class:`PageState` that
  outlives individual renders;
* :class:`Disabled` - everything fits on one page.

Rendering only reads state.  The single mutation is in
:func:`apply_navigation`, which writes the uncontrolled page.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Sequence, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class PageState:
    """Component-local page counter for uncontrolled pagination."""

    page: int = 1


@dataclass(frozen=True)
class Controlled:
    page: int


@dataclass(frozen=True)
class Uncontrolled:
    state: PageState


@dataclass(frozen=True)
class Disabled:
    pass


PaginationMode = Union[Controlled, Uncontrolled, Disabled]


def clamp_page(page: int, total_pages: int) -> int:
    return max(1, min(page, total_pages))


def count_pages(total_items: int, page_size: int | None) -> int:
    if page_size is None or page_size <= 0:
        return 1
    return max(1, math.ceil(total_items / page_size))


@dataclass(frozen=True)
class PageWindow:
    """The resolved pagination of one render."""

    mode: PaginationMode
    current_page: int
    total_pages: int
    page_size: int | None
    total_items: int

    @property
    def paginated(self) -> bool:
        return self.total_pages > 1

    @property
    def start(self) -> int:
        """1-based index of the first item on the current page."""
        if not self.paginated:
            return 1 if self.total_items else 0
        return (self.current_page - 1) * self.page_size + 1

    @property
    def end(self) -> int:
        """1-based index of the last item on the current page (inclusive)."""
        if not self.paginated:
            return self.total_items
        return min(self.current_page * self.page_size, self.total_items)

    def slice(self, items: Sequence[T]) -> list[T]:
        if not self.paginated:
            return list(items)
        return list(items[self.start - 1 : self.end])


def resolve_pagination(
    total_items: int,
    page: int | None = None,
    page_size: int | None = None,
    state: PageState | None = None,
) -> PageWindow:
    """Pick the pagination mode and the page to display.

    An explicit *page* selects controlled mode.  Otherwise a usable
    *page_size* that yields more than one page selects uncontrolled mode,
    reading the current page from *state*.  The displayed page is always
    clamped to ``[1, total_pages]``; a stale uncontrolled page is re-clamped
    here rather than producing an empty window.
    """
    if page_size is not None and page_size <= 0:
        page_size = None
    total_pages = count_pages(total_items, page_size)

    mode: PaginationMode
    if page is not None:
        mode = Controlled(page)
        requested = page
    elif page_size is not None and total_pages > 1:
        mode = Uncontrolled(state if state is not None else PageState())
        requested = mode.state.page
    else:
        mode = Disabled()
        requested = 1

    return PageWindow(
        mode=mode,
        current_page=clamp_page(requested, total_pages),
        total_pages=total_pages,
        page_size=page_size,
        total_items=total_items,
    )


def current_page_of(window: PageWindow) -> int:
    """Read the page navigation should start from.

    Uncontrolled state is read fresh so that bindings created during an
    earlier render still see later transitions.
    """
    if isinstance(window.mode, Uncontrolled):
        return clamp_page(window.mode.state.page, window.total_pages)
    return window.current_page


def navigate(
    current_page: int,
    total_pages: int,
    delta: int = 0,
    absolute: int | None = None,
) -> int:
    """Compute the target page of a navigation request.

    *absolute* overrides *delta*; the result is clamped to
    ``[1, total_pages]``.
    """
    requested = absolute if absolute is not None else current_page + delta
    return clamp_page(requested, max(1, total_pages))


def apply_navigation(
    window: PageWindow,
    delta: int = 0,
    absolute: int | None = None,
    on_page_changed: Callable[[int], None] | None = None,
) -> int | None:
    """Run one navigation request against *window*.

    Returns the new page, or ``None`` when the request is a no-op (disabled
    pagination or already on the target page).  Uncontrolled mode writes
    the new page to its state before notifying; controlled mode only
    notifies.
    """
    mode = window.mode
    if isinstance(mode, Disabled):
        return None

    current = current_page_of(window)
    target = navigate(current, window.total_pages, delta=delta, absolute=absolute)
    if target == current:
        logger.debug("navigation to page %d ignored: already there", target)
        return None

    if isinstance(mode, Uncontrolled):
        mode.state.page = target
    logger.debug(
        "%s page change %d -> %d", type(mode).__name__.lower(), current, target
    )
    if on_page_changed is not None:
        on_page_changed(target)
    return target
