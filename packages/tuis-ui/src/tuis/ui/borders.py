"""Border glyph sets for tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class BorderStyle(str, Enum):
    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"
    ROUNDED = "rounded"
    ASCII = "ascii"


@dataclass(frozen=True)
class GlyphSet:
    """Box-drawing characters for one border style.

    ``top_*`` / ``bottom_*`` draw the outer rules, ``left`` / ``mid_mid`` /
    ``right`` separate cells on body lines and ``header_*`` draw the rule
    under a header row.
    """

    top_left: str
    top: str
    top_mid: str
    top_right: str
    left: str
    mid_mid: str
    right: str
    bottom_left: str
    bottom: str
    bottom_mid: str
    bottom_right: str
    header_left: str
    header: str
    header_mid: str
    header_right: str

    def hline(self, kind: str, col_widths: list[int]) -> str:
        """Draw a full-width rule; *kind* is ``top``, ``header`` or ``bottom``."""
        left, fill, mid, right = (
            getattr(self, f"{kind}_left"),
            getattr(self, kind),
            getattr(self, f"{kind}_mid"),
            getattr(self, f"{kind}_right"),
        )
        return left + mid.join(fill * w for w in col_widths) + right


BORDER_STYLES: dict[BorderStyle, GlyphSet] = {
    BorderStyle.SINGLE: GlyphSet(
        top_left="┌", top="─", top_mid="┬", top_right="┐",
        left="│", mid_mid="│", right="│",
        bottom_left="└", bottom="─", bottom_mid="┴", bottom_right="┘",
        header_left="├", header="─", header_mid="┼", header_right="┤",
    ),
    BorderStyle.DOUBLE: GlyphSet(
        top_left="╔", top="═", top_mid="╦", top_right="╗",
        left="║", mid_mid="║", right="║",
        bottom_left="╚", bottom="═", bottom_mid="╩", bottom_right="╝",
        header_left="╠", header="═", header_mid="╬", header_right="╣",
    ),
    BorderStyle.ROUNDED: GlyphSet(
        top_left="╭", top="─", top_mid="┬", top_right="╮",
        left="│", mid_mid="│", right="│",
        bottom_left="╰", bottom="─", bottom_mid="┴", bottom_right="╯",
        header_left="├", header="─", header_mid="┼", header_right="┤",
    ),
    BorderStyle.ASCII: GlyphSet(
        top_left="+", top="-", top_mid="+", top_right="+",
        left="|", mid_mid="|", right="|",
        bottom_left="+", bottom="-", bottom_mid="+", bottom_right="+",
        header_left="+", header="-", header_mid="+", header_right="+",
    ),
}

BorderSpec = Union[bool, str, BorderStyle, None]


def resolve_border(spec: BorderSpec) -> GlyphSet | None:
    """Map a ``border`` option to its glyph set.

    ``True`` means single, ``False`` / ``None`` / ``"none"`` mean no border.
    Unknown style names also resolve to no border.
    """
    if spec is True:
        return BORDER_STYLES[BorderStyle.SINGLE]
    if not spec:
        return None
    try:
        style = BorderStyle(spec)
    except ValueError:
        return None
    return BORDER_STYLES.get(style)
