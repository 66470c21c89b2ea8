"""Unit tests for InputDispatcher."""
from __future__ import annotations

import random

import pytest

from cv_nav.content import root
from cv_nav.tui.dispatcher import (
    Command,
    InputDispatcher,
    KeyEvent,
    Outcome,
    ResizeEvent,
    View,
    ViewState,
    translate,
)
from cv_nav.tui.navigator import NavigationStack


def _dispatcher(factory, width: int = 80, height: int = 24) -> InputDispatcher:
    return InputDispatcher(NavigationStack(factory()), ViewState(width=width, height=height))


def _press(d: InputDispatcher, *keys: str) -> Outcome:
    outcome = Outcome()
    for key in keys:
        outcome = d.handle(KeyEvent(key))
    return outcome


@pytest.mark.parametrize(
    "key,command",
    [
        ("c-c", Command.QUIT),
        ("q", Command.QUIT),
        ("enter", Command.SELECT),
        ("escape", Command.BACK),
        ("k", Command.UP),
        ("down", Command.DOWN),
        ("G", Command.END),
        ("x", None),
    ],
)
def test_translate_keys(key, command):
    assert translate(KeyEvent(key)) is command


def test_translate_resize():
    assert translate(ResizeEvent(100, 30)) is Command.RESIZE


def test_select_branch_enters_it():
    d = _dispatcher(root)

    outcome = _press(d, "enter")

    assert outcome == Outcome()
    assert d.nav.current_node().title == "Introduction"
    assert d.nav.depth() == 1


def test_back_returns_to_root_with_cursor_reset():
    d = _dispatcher(root)
    _press(d, "enter", "j", "j")
    assert d.nav.cursor == 2

    outcome = _press(d, "escape")

    assert outcome.quit is False
    assert d.nav.current_node().title == "Bhuwan Panta's CV"
    assert d.nav.cursor == 0


def test_back_at_root_quits():
    d = _dispatcher(root)

    outcome = _press(d, "escape")

    assert outcome.quit is True
    assert d.nav.depth() == 0


@pytest.mark.parametrize("key", ["q", "c-c"])
def test_quit_keys_quit_from_anywhere(key):
    d = _dispatcher(root)
    _press(d, "enter")

    assert _press(d, key).quit is True


def test_select_overflowing_leaf_shows_detail():
    """Contact is 82 characters: too long for an 80-column row."""
    d = _dispatcher(root, width=80)
    _press(d, "enter")

    outcome = _press(d, "enter")

    assert outcome.view is View.DETAIL
    assert outcome.detail is not None
    assert outcome.detail.label == "Contact"
    assert outcome.detail.text.startswith("Email: ")
    assert d.nav.current_node().title == "Introduction"


def test_select_fitting_leaf_is_noop():
    d = _dispatcher(root, width=120)
    _press(d, "enter")

    outcome = _press(d, "enter")

    assert outcome == Outcome()
    assert d.nav.current_node().title == "Introduction"
    assert d.nav.depth() == 1
    assert d.nav.cursor == 0


def test_detail_flag_cleared_by_next_key():
    d = _dispatcher(root, width=80)
    _press(d, "enter", "enter")
    assert d.last.view is View.DETAIL

    outcome = _press(d, "j")

    assert outcome.view is View.LIST
    assert outcome.detail is None
    assert d.nav.cursor == 1


def test_detail_flag_cleared_by_unmapped_key():
    d = _dispatcher(root, width=80)
    _press(d, "enter", "enter")

    outcome = _press(d, "x")

    assert outcome == Outcome()
    assert d.nav.current_node().title == "Introduction"


def test_back_from_detail_pops_like_back_from_list():
    d = _dispatcher(root, width=80)
    _press(d, "enter", "enter")
    assert d.last.detail is not None

    outcome = _press(d, "escape")

    assert outcome == Outcome()
    assert d.nav.depth() == 0
    assert d.nav.current_node().title == "Bhuwan Panta's CV"
    assert d.nav.cursor == 0

    assert _press(d, "escape").quit is True


def test_resize_keeps_detail_and_updates_geometry():
    d = _dispatcher(root, width=80)
    _press(d, "enter", "enter")

    outcome = d.handle(ResizeEvent(width=60, height=20))

    assert outcome.view is View.DETAIL
    assert d.state.width == 60
    assert d.state.height == 20
    assert d.nav.depth() == 1


def test_resize_does_not_touch_navigation():
    d = _dispatcher(root)
    _press(d, "enter", "j")

    outcome = d.handle(ResizeEvent(width=200, height=50))

    assert outcome == Outcome()
    assert d.nav.current_node().title == "Introduction"
    assert d.nav.cursor == 1


def test_wider_terminal_makes_leaf_fit():
    d = _dispatcher(root, width=80)
    _press(d, "enter")
    d.handle(ResizeEvent(width=86, height=24))

    assert _press(d, "enter") == Outcome()


def test_select_on_empty_node_is_noop(small_root):
    d = _dispatcher(small_root)
    _press(d, "j", "j", "enter")
    assert d.nav.current_node().title == "Empty"

    for key in ("enter", "j", "k", "G", "pagedown"):
        assert _press(d, key) == Outcome()
    assert d.nav.depth() == 1
    assert d.nav.cursor == 0


def test_cursor_moves_are_clamped():
    d = _dispatcher(root)
    last = len(d.nav.current_node().entries) - 1

    _press(d, "k")
    assert d.nav.cursor == 0
    _press(d, "G")
    assert d.nav.cursor == last
    _press(d, "j")
    assert d.nav.cursor == last
    _press(d, "g")
    assert d.nav.cursor == 0


def test_page_keys_move_by_page_size():
    """Height 12 leaves room for two rows per page."""
    d = _dispatcher(root, height=12)

    _press(d, "pagedown")
    assert d.nav.cursor == 2
    _press(d, "right")
    assert d.nav.cursor == 4
    _press(d, "pagedown")
    assert d.nav.cursor == 5
    _press(d, "pageup")
    assert d.nav.cursor == 3


def test_session_history_records_visits():
    d = _dispatcher(root)
    _press(d, "enter", "escape", "j", "j", "enter")

    assert d.state.session_history == [
        "Bhuwan Panta's CV",
        "Introduction",
        "Bhuwan Panta's CV",
        "Experience",
    ]


def test_random_walk_keeps_invariants():
    """Cursor stays in range and depth matches enters minus backs."""
    rng = random.Random(1234)
    keys = ["enter", "escape", "j", "k", "g", "G", "pagedown", "pageup", "x"]
    d = _dispatcher(root, width=80)
    expected_depth = 0

    for _ in range(500):
        key = rng.choice(keys)
        depth_before = d.nav.depth()
        outcome = d.handle(KeyEvent(key))

        if key == "escape" and outcome.quit:
            assert depth_before == 0
            continue
        if key == "escape":
            expected_depth -= 1
        elif key == "enter" and d.nav.depth() > depth_before:
            expected_depth += 1

        assert d.nav.depth() == expected_depth >= 0
        entries = d.nav.current_node().entries
        if entries:
            assert 0 <= d.nav.cursor < len(entries)
        else:
            assert d.nav.cursor == 0
        if key != "enter":
            assert outcome.detail is None
