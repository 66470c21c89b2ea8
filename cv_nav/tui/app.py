"""Full-screen terminal loop for the navigator."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import Layout
from prompt_toolkit.layout.containers import Window
from prompt_toolkit.layout.controls import FormattedTextControl

from ..content import root
from .dispatcher import KEYMAP, InputDispatcher, KeyEvent, ResizeEvent, View, ViewState
from .navigator import NavigationStack
from .render import ViewRenderer, to_ansi
from .theme import Theme

if TYPE_CHECKING:
    from prompt_toolkit.input import Input
    from prompt_toolkit.output import Output

    from ..settings import Settings
    from .entries import Node

logger = logging.getLogger(__name__)


class NavigatorApp:
    """Main event loop: key presses in, full-frame redraws out.

    One prompt_toolkit key press is handled completely (state change, then
    render) before the next is read.
    """

    def __init__(self, dispatcher: InputDispatcher, renderer: ViewRenderer):
        self.dispatcher = dispatcher
        self.renderer = renderer

    def frame(self) -> str:
        """ANSI text for the current state at the last known size."""
        state = self.dispatcher.state
        outcome = self.dispatcher.last
        if outcome.view is View.DETAIL and outcome.detail is not None:
            renderable = self.renderer.render_detail(outcome.detail, state.width)
        else:
            nav = self.dispatcher.nav
            trail = nav.breadcrumbs() if nav.depth() else None
            renderable = self.renderer.render_list(
                nav.current_node(), nav.cursor, state.width, state.height, trail=trail
            )
        return to_ansi(renderable, state.width, state.height)

    def key_bindings(self) -> KeyBindings:
        kb = KeyBindings()

        def _bind(name: str) -> None:
            @kb.add(name, eager=True)
            def _handler(event: KeyPressEvent) -> None:
                self._dispatch(event, name)

        for name in KEYMAP:
            _bind(name)

        @kb.add(Keys.Any)
        def _other(event: KeyPressEvent) -> None:
            self._dispatch(event, event.data)

        return kb

    def _dispatch(self, event: KeyPressEvent, key: str) -> None:
        outcome = self.dispatcher.handle(KeyEvent(key))
        if outcome.quit:
            logger.info("quit from %s", self.dispatcher.nav.breadcrumbs())
            event.app.exit(result=0)

    def _check_size(self, app: Application) -> None:
        size = app.output.get_size()
        state = self.dispatcher.state
        if (size.columns, size.rows) != (state.width, state.height):
            logger.debug("resize to %dx%d", size.columns, size.rows)
            self.dispatcher.handle(ResizeEvent(width=size.columns, height=size.rows))

    def build(self, input: Input | None = None, output: Output | None = None) -> Application:
        control = FormattedTextControl(lambda: ANSI(self.frame()), focusable=True)
        return Application(
            layout=Layout(Window(content=control, wrap_lines=False)),
            key_bindings=self.key_bindings(),
            full_screen=True,
            before_render=self._check_size,
            input=input,
            output=output,
        )

    def run(self, input: Input | None = None, output: Output | None = None) -> int:
        """Run until quit; returns the process exit code."""
        logger.info("navigator started at %s", self.dispatcher.nav.breadcrumbs())
        result = self.build(input=input, output=output).run()
        return int(result or 0)


def create_app(settings: Settings, root_factory: Callable[[], Node] = root) -> NavigatorApp:
    """Wire stack, dispatcher and renderer for one session."""
    nav = NavigationStack(root_factory())
    state = ViewState(width=settings.CV_NAV_DEFAULT_WIDTH, height=settings.CV_NAV_DEFAULT_HEIGHT)
    return NavigatorApp(InputDispatcher(nav, state), ViewRenderer(Theme.from_settings(settings)))


def run_app(settings: Settings) -> int:
    return create_app(settings).run()
