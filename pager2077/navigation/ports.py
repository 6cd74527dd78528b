"""
Interfaces of the collaborators the navigation core talks to.
"""

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, runtime_checkable

from ..Utils.errors import PagerError
from ..state.list_data import Friend, PagerMessage, PendingRequest


@runtime_checkable
class ListDataSource(Protocol):
    """Supplies the lists the screens scroll through."""

    def friends(self) -> Sequence[Friend]: ...

    def pending_requests(self) -> Sequence[PendingRequest]: ...

    def messages(self) -> Sequence[PagerMessage]: ...


@runtime_checkable
class ClipboardReader(Protocol):
    """Reads text from the system clipboard. Raises ClipboardReadError on failure."""

    async def read_text(self) -> str: ...


@runtime_checkable
class FriendService(Protocol):
    """Friend request operations. Results are not fed back into navigation."""

    async def send_request(self, code: str) -> None: ...

    async def accept_request(self, code: str) -> None: ...

    async def reject_request(self, code: str) -> None: ...


@runtime_checkable
class SettingsStore(Protocol):
    """Boolean pager preferences such as sound and vibrate."""

    def get(self, key: str) -> bool: ...

    def toggle(self, key: str) -> bool: ...


@dataclass(frozen=True)
class ClipboardResult:
    """Outcome of a clipboard read: either text or the error that stopped it."""

    text: Optional[str] = None
    error: Optional[PagerError] = None

    @classmethod
    def success(cls, text: str) -> "ClipboardResult":
        return cls(text=text)

    @classmethod
    def failure(cls, error: PagerError) -> "ClipboardResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None and self.text is not None
