"""Pager application: maps keys to the pager buttons and redraws the LCD."""

from typing import Optional

from loguru import logger
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Center, Middle
from textual.reactive import reactive
from textual.widgets import Footer

from .navigation.dispatcher import InputEvent
from .navigation.navigation_manager import NavigationManager
from .navigation.ports import ClipboardReader, FriendService, ListDataSource, SettingsStore
from .state.navigation_state import NavigationState
from .UI.pager_display import PagerDisplay, render_lines


class PagerApp(App):
    """Terminal pager driven by five buttons."""

    CSS = """
    Screen {
        background: #2A2A2A;
    }
    """

    TITLE = "PAGER 2077"

    BINDINGS = [
        Binding("up", "press('up')", "Up", show=False),
        Binding("down", "press('down')", "Down", show=False),
        Binding("enter", "press('select')", "Select"),
        Binding("escape,backspace", "press('back')", "Back"),
        Binding("m", "press('menu')", "Menu"),
        Binding("left", "press('left')", "Left", show=False),
        Binding("right", "press('right')", "Right", show=False),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    # Background calls can change the error line without changing the state
    nav_state: reactive[NavigationState] = reactive(NavigationState.initial, init=False, always_update=True)

    def __init__(
        self,
        data_source: ListDataSource,
        clipboard: ClipboardReader,
        friend_service: FriendService,
        own_code: str,
        settings: Optional[SettingsStore] = None,
        clipboard_timeout: float = 2.0,
    ):
        super().__init__()
        self.own_code = own_code
        self.settings = settings
        self.manager = NavigationManager(
            data_source=data_source,
            clipboard=clipboard,
            friend_service=friend_service,
            settings=settings,
            clipboard_timeout=clipboard_timeout,
        )

    def compose(self) -> ComposeResult:
        with Middle():
            with Center():
                yield PagerDisplay(id="lcd", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        self.manager.subscribe(self._on_state_changed)
        self.refresh_display()
        logger.info("Pager started")

    def action_press(self, button: str) -> None:
        """
        Forward a button press to the navigation manager.

        Runs as a worker so the message pump keeps reading keys; presses that
        arrive during a clipboard read are dropped by the manager.
        """
        self.run_worker(self.manager.handle(InputEvent(button)), group="buttons", exclusive=False)

    def _on_state_changed(self, state: NavigationState) -> None:
        self.nav_state = state

    def watch_nav_state(self, old_state: NavigationState, new_state: NavigationState) -> None:
        self.refresh_display()

    def refresh_display(self) -> None:
        """Redraw the LCD from the manager's current state and lists."""
        lines = render_lines(
            self.manager.current_state(),
            self.manager.snapshot(),
            own_code=self.own_code,
            settings=self.settings,
            error=self.manager.last_error,
        )
        self.query_one("#lcd", PagerDisplay).show_lines(lines)


def run():
    """Run the pager with the local demo directory."""
    from .config import get_clipboard_timeout, get_own_hex_code, load_cli_config_and_ensure_existence
    from .services import ConfigSettingsStore, InMemoryFriendDirectory, PyperclipClipboardReader
    from .Utils.logging_config import configure_logging

    load_cli_config_and_ensure_existence()
    configure_logging()

    own_code = get_own_hex_code()
    directory = InMemoryFriendDirectory.demo(own_code)
    app = PagerApp(
        data_source=directory,
        clipboard=PyperclipClipboardReader(),
        friend_service=directory,
        own_code=own_code,
        settings=ConfigSettingsStore(),
        clipboard_timeout=get_clipboard_timeout(),
    )
    app.run()


if __name__ == "__main__":
    run()
