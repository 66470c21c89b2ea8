"""Content tree primitives: menu screens and their rows."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Union


@dataclass(frozen=True)
class Branch:
    """A row that opens another screen.

    `child` must be pure: calling it again yields an equivalent Node.
    """

    label: str
    summary: str
    child: Callable[[], "Node"] = field(compare=False, repr=False)

    @property
    def description(self) -> str:
        return self.summary


@dataclass(frozen=True)
class Leaf:
    """A display-only row carrying its full text."""

    label: str
    text: str

    @property
    def description(self) -> str:
        return self.text


Entry = Union[Branch, Leaf]


@dataclass(frozen=True)
class Node:
    """One navigable screen: a title plus an ordered list of entries."""

    title: str
    entries: tuple[Entry, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable from content producers but store a tuple.
        if not isinstance(self.entries, tuple):
            object.__setattr__(self, "entries", tuple(self.entries))

    def labels(self) -> list[str]:
        return [entry.label for entry in self.entries]
