from __future__ import annotations

import os
import sys

import pytest


def _ensure_project_root_on_path() -> None:
    # When running via the venv's pytest entrypoint, the CWD is not guaranteed to
    # be on sys.path. Ensure the repository root (containing `cv_nav/`) is importable.
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


_ensure_project_root_on_path()


from cv_nav.tui.entries import Branch, Leaf, Node  # noqa: E402


def _child() -> Node:
    return Node(
        "Child",
        (
            Leaf("Short", "fits"),
            Leaf("Long", "word " * 40),
            Branch("Deeper", "one more level", _grandchild),
        ),
    )


def _grandchild() -> Node:
    return Node("Grandchild", (Leaf("Only", "leaf"),))


def _empty() -> Node:
    return Node("Empty")


def _small_root() -> Node:
    return Node(
        "Root",
        (
            Branch("Child", "a nested screen", _child),
            Leaf("Note", "short text"),
            Branch("Empty", "nothing inside", _empty),
        ),
    )


@pytest.fixture
def small_root():
    """Factory for a three-level test tree with an empty screen."""
    return _small_root
