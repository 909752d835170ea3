"""Textual TUI for gch."""

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Static

from gch import keys, render
from gch.models import Mode
from gch.state import AppState

TICK_SECONDS = 0.1
SCROLL_KEYS = ("pageup", "pagedown")


CSS = """
Screen {
    layout: vertical;
}

#header {
    height: 3;
    padding: 1 1 0 1;
    text-align: center;
}

#body_container {
    height: 1fr;
    border: round $primary;
    overflow-y: auto;
    padding: 0 1;
}

#notification {
    padding: 0 1;
    height: auto;
    background: $error;
    color: $text;
    text-style: bold;
}

#status_bar {
    padding: 0 1;
    height: 1;
    background: $primary;
    color: $text;
}
"""


class MainScreen(Screen[None]):
    """Single screen; its content follows the current mode."""

    def __init__(self, state: AppState) -> None:
        super().__init__()
        self.state = state

    def compose(self) -> ComposeResult:
        yield Static("", id="header")
        with Vertical(id="body_container"):
            yield Static("", id="body")
        yield Static("", id="notification")
        yield Static("", id="status_bar")

    def on_mount(self) -> None:
        self.state.refresh()
        self._repaint()
        self.set_interval(TICK_SECONDS, self._tick)

    def _tick(self) -> None:
        self.state.tick()
        self._repaint()

    def _repaint(self) -> None:
        state = self.state
        self.query_one("#header", Static).update(render.render_header(state))
        self.query_one("#body", Static).update(render.render_body(state))
        self.query_one("#status_bar", Static).update(render.render_status_bar(state))
        notification = self.query_one("#notification", Static)
        notification.update(render.render_notification(state))
        notification.display = state.notification is not None

    def on_key(self, event: events.Key) -> None:
        # Every key belongs to the screen, including tab and escape.
        event.stop()
        event.prevent_default()
        body = self.query_one("#body_container", Vertical)
        if self.state.mode is Mode.DIFF_VIEW and event.key in SCROLL_KEYS:
            if event.key == "pagedown":
                body.scroll_page_down(animate=False)
            else:
                body.scroll_page_up(animate=False)
            return

        previous_mode = self.state.mode
        keys.dispatch(self.state, keys.Key(event.key, event.character))
        if self.state.mode is not previous_mode:
            body.scroll_home(animate=False)
        self._repaint()
        if self.state.should_quit:
            self.app.exit()


class TuiApp(App[None]):
    """Main textual application."""

    CSS = CSS
    TITLE = render.TITLE

    def __init__(self, state: AppState) -> None:
        super().__init__()
        self.state = state

    def get_default_screen(self) -> Screen[None]:
        return MainScreen(self.state)


def run_tui(state: AppState) -> None:
    """Run the textual TUI application until the user quits."""
    TuiApp(state).run()
