"""Navigation stack over lazily produced content nodes."""
from __future__ import annotations

import logging

from .entries import Entry, Leaf, Node

logger = logging.getLogger(__name__)


class NavigationStack:
    """Stack-based navigation with breadcrumbs.

    Holds the screen being shown plus every screen it was entered from:
    - Enter on a branch pushes the current node and shows the child
    - Back pops the last ancestor into view
    - Back at the root reports "no parent" so the caller can quit

    Nodes carry no parent references; the ancestry list is the only way back.
    """

    def __init__(self, root: Node):
        """Initialize with the root node as the starting screen.

        Args:
            root: Node shown at startup
        """
        self.current: Node = root
        self.ancestry: list[Node] = []
        self.cursor: int = 0

    def enter(self, cursor_position: int) -> Leaf | None:
        """Open the entry at `cursor_position`.

        Args:
            cursor_position: Index into the current node's entries

        Returns:
            None when a branch was entered, or the selected Leaf so the caller
            can decide whether its text needs the detail view

        Raises:
            IndexError: If `cursor_position` does not name an entry
        """
        if not 0 <= cursor_position < len(self.current.entries):
            raise IndexError(
                f"cursor {cursor_position} outside {self.current.title!r} "
                f"({len(self.current.entries)} entries)"
            )
        entry = self.current.entries[cursor_position]
        if isinstance(entry, Leaf):
            return entry

        child = entry.child()
        self.ancestry.append(self.current)
        self.current = child
        self.cursor = 0
        logger.debug("enter %r (depth=%d)", child.title, self.depth())
        return None

    def back(self) -> bool:
        """Go back to the previous screen.

        Returns:
            True if a parent was restored, False if already at the root
        """
        if not self.ancestry:
            return False
        self.current = self.ancestry.pop()
        self.cursor = 0
        logger.debug("back to %r (depth=%d)", self.current.title, self.depth())
        return True

    def current_node(self) -> Node:
        return self.current

    def depth(self) -> int:
        """Number of ancestors above the current screen (0 at the root)."""
        return len(self.ancestry)

    def selected_entry(self) -> Entry | None:
        if not self.current.entries:
            return None
        return self.current.entries[self.cursor]

    def move_cursor(self, delta: int) -> int:
        """Move the cursor by `delta` rows, clamped to the entry list."""
        return self.jump_to(self.cursor + delta)

    def jump_to(self, index: int) -> int:
        last = len(self.current.entries) - 1
        self.cursor = max(0, min(index, last))
        return self.cursor

    def breadcrumbs(self) -> str:
        """Generate breadcrumb navigation string.

        Returns:
            Breadcrumb path like "Bhuwan Panta's CV > Experience > RippeyAI"
        """
        titles = [node.title for node in self.ancestry]
        titles.append(self.current.title)
        return " > ".join(titles)
