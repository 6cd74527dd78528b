"""
Navigation manager for the pager.
"""

import asyncio
from typing import Awaitable, Callable, List, Optional, Set

from loguru import logger

from ..Utils.errors import ClipboardReadError, PagerError, get_display_message
from ..state.list_data import ListSnapshot
from ..state.navigation_state import NavigationState
from .actions import AcceptFriendRequest, ReadClipboard, RejectFriendRequest, SendFriendRequest, ToggleSetting
from .dispatcher import Action, InputEvent, apply_clipboard_result, dispatch
from .ports import ClipboardReader, ClipboardResult, FriendService, ListDataSource, SettingsStore
from .screen_registry import SCREEN_REGISTRY

StateListener = Callable[[NavigationState], None]


class NavigationManager:
    """
    Owns the navigation state and runs input events against it.

    Events are handled one at a time. The clipboard read is awaited before
    the next state is produced; while it is outstanding, further events are
    dropped. Friend service calls run in the background and their outcome
    never changes the navigation state.
    """

    def __init__(
        self,
        data_source: ListDataSource,
        clipboard: ClipboardReader,
        friend_service: FriendService,
        settings: Optional[SettingsStore] = None,
        clipboard_timeout: float = 2.0,
    ):
        self.data_source = data_source
        self.clipboard = clipboard
        self.friend_service = friend_service
        self.settings = settings
        self.clipboard_timeout = clipboard_timeout
        self._state = NavigationState.initial()
        self._busy = asyncio.Lock()
        self._listeners: List[StateListener] = []
        self._background: Set[asyncio.Task] = set()
        self.last_error: Optional[str] = None

    def current_state(self) -> NavigationState:
        """Read-only snapshot of the current state."""
        return self._state

    def snapshot(self) -> ListSnapshot:
        """Current lists from the data source."""
        return ListSnapshot(
            friends=tuple(self.data_source.friends()),
            pending_requests=tuple(self.data_source.pending_requests()),
            messages=tuple(self.data_source.messages()),
        )

    def subscribe(self, listener: StateListener) -> None:
        """Call listener after every state change and background call."""
        self._listeners.append(listener)

    async def handle(self, event: InputEvent) -> NavigationState:
        """
        Run one input event.

        Args:
            event: The button that was pressed

        Returns:
            The state after the event
        """
        if self._busy.locked():
            logger.debug(f"Dropping {event.name}: clipboard read still outstanding")
            return self._state

        async with self._busy:
            transition = dispatch(self._state, event, self.snapshot())
            new_state = transition.state

            if isinstance(transition.action, ReadClipboard):
                result = await self._read_clipboard()
                new_state = apply_clipboard_result(new_state, result)
            elif transition.action is not None:
                self._run_action(transition.action)

            if new_state != self._state:
                logger.debug(f"{event.name}: {self._state} -> {new_state}")
            self._state = new_state

        self._notify()
        return self._state

    async def on_up(self) -> NavigationState:
        return await self.handle(InputEvent.UP)

    async def on_down(self) -> NavigationState:
        return await self.handle(InputEvent.DOWN)

    async def on_select(self) -> NavigationState:
        return await self.handle(InputEvent.SELECT)

    async def on_back(self) -> NavigationState:
        return await self.handle(InputEvent.BACK)

    async def on_menu(self) -> NavigationState:
        return await self.handle(InputEvent.MENU)

    async def on_left(self) -> NavigationState:
        return await self.handle(InputEvent.LEFT)

    async def on_right(self) -> NavigationState:
        return await self.handle(InputEvent.RIGHT)

    async def wait_for_background(self) -> None:
        """Wait until every scheduled friend service call has finished."""
        while self._background:
            await asyncio.gather(*list(self._background), return_exceptions=True)

    async def _read_clipboard(self) -> ClipboardResult:
        try:
            text = await asyncio.wait_for(self.clipboard.read_text(), timeout=self.clipboard_timeout)
        except asyncio.TimeoutError as e:
            return ClipboardResult.failure(ClipboardReadError("Clipboard read timed out", e))
        except PagerError as e:
            return ClipboardResult.failure(e)
        except Exception as e:
            logger.exception(f"Unexpected clipboard failure: {e}")
            return ClipboardResult.failure(ClipboardReadError(str(e), e))

        if not isinstance(text, str):
            return ClipboardResult.failure(ClipboardReadError(f"Clipboard returned {type(text).__name__}"))
        return ClipboardResult.success(text)

    def _run_action(self, action: Action) -> None:
        if isinstance(action, SendFriendRequest):
            self._schedule("send_request", action.code, self.friend_service.send_request(action.code))
        elif isinstance(action, AcceptFriendRequest):
            self._schedule("accept_request", action.code, self.friend_service.accept_request(action.code))
        elif isinstance(action, RejectFriendRequest):
            self._schedule("reject_request", action.code, self.friend_service.reject_request(action.code))
        elif isinstance(action, ToggleSetting):
            self._toggle_setting(action.key)
        else:
            raise TypeError(f"Unhandled action: {action!r}")

    def _toggle_setting(self, key: str) -> None:
        if self.settings is None:
            logger.warning(f"No settings store; ignoring toggle of {key}")
            return
        value = self.settings.toggle(key)
        logger.info(f"Setting {key} is now {'ON' if value else 'OFF'}")

    def _schedule(self, name: str, code: str, call: Awaitable[None]) -> None:
        task = asyncio.ensure_future(self._run_service_call(name, code, call))
        self._background.add(task)
        task.add_done_callback(self._background.discard)

    async def _run_service_call(self, name: str, code: str, call: Awaitable[None]) -> None:
        try:
            await call
        except PagerError as e:
            self.last_error = get_display_message(e)
            logger.warning(f"{name}({code}) failed: {e}")
        except Exception as e:
            self.last_error = get_display_message(e)
            logger.exception(f"{name}({code}) raised unexpectedly: {e}")
        else:
            self.last_error = None
            logger.info(f"{name}({code}) completed")
        self._clamp_to_lists()
        self._notify()

    def _clamp_to_lists(self) -> None:
        # Accepts and rejects shrink the request list after the event that caused them
        index = SCREEN_REGISTRY.clamp(self._state.screen, self._state.selected_index, self.snapshot())
        if index != self._state.selected_index:
            logger.debug(f"Clamped selection on {self._state.screen.name} from {self._state.selected_index} to {index}")
            self._state = self._state.with_index(index)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception as e:
                logger.error(f"State listener failed: {e}")
