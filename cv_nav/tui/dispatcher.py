"""Maps terminal events onto navigation commands."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .entries import Leaf
from .navigator import NavigationStack
from .render import measure_fits, page_size

logger = logging.getLogger(__name__)


class Command(Enum):
    QUIT = "quit"
    SELECT = "select"
    BACK = "back"
    UP = "up"
    DOWN = "down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
    RESIZE = "resize"


class View(Enum):
    LIST = "list"
    DETAIL = "detail"


# Key names follow prompt_toolkit's binding names.
KEYMAP: dict[str, Command] = {
    "c-c": Command.QUIT,
    "q": Command.QUIT,
    "enter": Command.SELECT,
    "escape": Command.BACK,
    "up": Command.UP,
    "k": Command.UP,
    "down": Command.DOWN,
    "j": Command.DOWN,
    "pageup": Command.PAGE_UP,
    "left": Command.PAGE_UP,
    "h": Command.PAGE_UP,
    "pagedown": Command.PAGE_DOWN,
    "right": Command.PAGE_DOWN,
    "l": Command.PAGE_DOWN,
    "home": Command.HOME,
    "g": Command.HOME,
    "end": Command.END,
    "G": Command.END,
}


@dataclass(frozen=True)
class KeyEvent:
    key: str


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


Event = Union[KeyEvent, ResizeEvent]


@dataclass(frozen=True)
class Outcome:
    """What the next frame should show.

    `detail` is the one-shot "show full text" hint: set only by the event
    that selected an overflowing leaf (or a resize while it is showing).
    """

    view: View = View.LIST
    detail: Leaf | None = None
    quit: bool = False


@dataclass
class ViewState:
    """Terminal geometry and diagnostics for one session."""

    width: int = 80
    height: int = 24
    session_history: list[str] = field(default_factory=list)

    def add_to_history(self, title: str) -> None:
        self.session_history.append(title)


def translate(event: Event) -> Command | None:
    """Return the command for `event`, or None for unmapped keys."""
    if isinstance(event, ResizeEvent):
        return Command.RESIZE
    return KEYMAP.get(event.key)


class InputDispatcher:
    """Applies one event at a time to the navigation stack.

    The dispatcher keeps no display mode of its own: every call to `handle`
    starts from a cleared detail hint and returns a fresh Outcome.
    """

    def __init__(self, nav: NavigationStack, state: ViewState | None = None):
        self.nav = nav
        self.state = state or ViewState()
        self.last = Outcome()
        self.state.add_to_history(nav.current_node().title)

    def handle(self, event: Event) -> Outcome:
        previous, self.last = self.last, Outcome()
        command = translate(event)
        if command is None:
            # Unbound keys have no effect on the list.
            return self.last

        logger.debug("command %s at %s", command.value, self.nav.breadcrumbs())
        self.last = self._apply(command, event, previous)
        return self.last

    def _apply(self, command: Command, event: Event, previous: Outcome) -> Outcome:
        nav = self.nav
        entries = nav.current_node().entries

        if command is Command.QUIT:
            return Outcome(quit=True)

        if command is Command.RESIZE:
            self.state.width = max(1, event.width)
            self.state.height = max(1, event.height)
            # A showing detail view is redrawn at the new size.
            return Outcome(view=previous.view, detail=previous.detail)

        if command is Command.BACK:
            if nav.back():
                self.state.add_to_history(nav.current_node().title)
                return Outcome()
            return Outcome(quit=True)

        if command is Command.SELECT:
            if not entries:
                return Outcome()
            leaf = nav.enter(nav.cursor)
            if leaf is None:
                self.state.add_to_history(nav.current_node().title)
                return Outcome()
            if measure_fits(leaf.text, self.state.width):
                return Outcome()
            return Outcome(view=View.DETAIL, detail=leaf)

        if entries:
            per_page = page_size(self.state.height)
            if command is Command.UP:
                nav.move_cursor(-1)
            elif command is Command.DOWN:
                nav.move_cursor(1)
            elif command is Command.PAGE_UP:
                nav.move_cursor(-per_page)
            elif command is Command.PAGE_DOWN:
                nav.move_cursor(per_page)
            elif command is Command.HOME:
                nav.jump_to(0)
            elif command is Command.END:
                nav.jump_to(len(entries) - 1)
        return Outcome()
