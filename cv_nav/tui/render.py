"""Frame rendering for the navigator.

Responsibilities:
  - Build the list frame for a node (title bar, paged rows, help line)
  - Build the detail frame for one leaf whose text overflows its row
  - Answer the single layout question the state machine asks: does it fit?
Notes:
  - Pure rendering: no state beyond the Theme given at construction.
"""
from __future__ import annotations

import io

from rich.cells import cell_len
from rich.console import Console, Group, RenderableType
from rich.constrain import Constrain
from rich.text import Text

from .entries import Entry, Leaf, Node
from .theme import Theme

# Columns reserved for borders/padding when deciding whether a leaf fits.
DETAIL_MARGIN = 4

LIST_HINTS = "↑/k up • ↓/j down • enter select • esc back • q quit"
DETAIL_HINTS = "↑/k up • ↓/j down • q quit"

HEADER_LINES = 2    # title bar + trail
FOOTER_LINES = 3    # page dots + spacer + hints
ROW_LINES = 2       # label + description
ROW_SPACING = 1

POINTER = "│ "
GUTTER = "  "


def measure_fits(text: str, width: int) -> bool:
    """True if `text` fits on one row of a list `width` columns wide."""
    return cell_len(text) <= width - DETAIL_MARGIN


def page_size(height: int) -> int:
    """How many rows fit in a list frame `height` lines tall (at least one)."""
    usable = height - HEADER_LINES - FOOTER_LINES
    return max(1, (usable + ROW_SPACING) // (ROW_LINES + ROW_SPACING))


def page_bounds(cursor: int, total: int, per_page: int) -> tuple[int, int]:
    """Return (start, stop) of the page holding `cursor`."""
    if total <= 0:
        return 0, 0
    start = (cursor // per_page) * per_page
    return start, min(total, start + per_page)


class ViewRenderer:
    """Turns navigation state into rich renderables."""

    def __init__(self, theme: Theme | None = None):
        self.theme = theme or Theme()

    # ----- List frame -----
    def render_list(
        self,
        node: Node,
        cursor: int,
        width: int,
        height: int,
        trail: str | None = None,
    ) -> RenderableType:
        """Render `node` as a paged list with the `cursor` row highlighted.

        Args:
            node: Screen to show
            cursor: Highlighted entry index
            width: Available columns
            height: Available lines
            trail: Optional breadcrumb line shown under the title

        Returns:
            A renderable frame
        """
        parts: list[RenderableType] = [self._title_bar(node.title, width)]
        if trail:
            parts.append(self._clip(Text(trail, style=self.theme.hint), width))
        else:
            parts.append(Text(""))

        total = len(node.entries)
        per_page = page_size(height)
        if total == 0:
            parts.append(Text(GUTTER + "No items.", style=self.theme.description))
        else:
            start, stop = page_bounds(cursor, total, per_page)
            for index in range(start, stop):
                if index > start:
                    parts.append(Text(""))
                parts.extend(self._row(node.entries[index], index == cursor, width))

        pages = max(1, -(-total // per_page))
        parts.append(Text(""))
        if pages > 1:
            parts.append(self._page_dots(cursor // per_page, pages))
        parts.append(self._clip(Text(LIST_HINTS, style=self.theme.hint), width))
        return Group(*parts)

    def _title_bar(self, title: str, width: int) -> Text:
        bar = Text(f" {title} ", style=self.theme.title, justify="center")
        return self._clip(bar, width)

    def _row(self, entry: Entry, selected: bool, width: int) -> list[Text]:
        if selected:
            prefix = Text(POINTER, style=self.theme.accent)
            label_style = self.theme.selected_label
            desc_style = self.theme.selected_description
        else:
            prefix = Text(GUTTER)
            label_style = self.theme.label
            desc_style = self.theme.description

        label = Text.assemble(prefix, Text(entry.label, style=label_style))
        desc = Text.assemble(prefix, Text(entry.description, style=desc_style))
        return [self._clip(label, width), self._clip(desc, width)]

    def _page_dots(self, page: int, pages: int) -> Text:
        dots = Text(GUTTER)
        for i in range(pages):
            dots.append("●" if i == page else "○", style=self.theme.accent if i == page else self.theme.hint)
        return dots

    @staticmethod
    def _clip(text: Text, width: int) -> Text:
        text.truncate(max(1, width), overflow="ellipsis")
        text.no_wrap = True
        return text

    # ----- Detail frame -----
    def render_detail(self, entry: Entry, width: int) -> RenderableType:
        """Render one leaf's full text.

        Raises:
            TypeError: If `entry` is not a Leaf
        """
        if not isinstance(entry, Leaf):
            raise TypeError(f"detail view needs a Leaf, got {type(entry).__name__}")
        body_width = max(1, width - DETAIL_MARGIN)
        return Group(
            Text(entry.label, style=self.theme.detail_title),
            Text(""),
            Constrain(Text(entry.text), width=body_width),
            Text(""),
            Text(DETAIL_HINTS, style=self.theme.hint),
        )


def to_ansi(renderable: RenderableType, width: int, height: int, color: bool = True) -> str:
    """Render to a string sized for a `width` x `height` terminal.

    With `color=False` the result is plain text (used by tests).
    """
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=max(1, width),
        height=max(1, height),
        force_terminal=color,
        color_system="truecolor" if color else None,
        legacy_windows=False,
    )
    console.print(renderable, end="")
    return buffer.getvalue()
