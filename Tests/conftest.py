"""
Root conftest.py for shared test fixtures and configuration.
This file provides common fixtures used across the test suite.
"""

import asyncio
import shutil
import sys
import tempfile
from pathlib import Path
from typing import List, Optional

import pytest

# Add project root to Python path for consistent imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pager2077 import config
from pager2077.Utils.errors import ClipboardReadError
from pager2077.state.list_data import Friend, ListSnapshot, PagerMessage, PendingRequest

FRIEND_CODES = ["F1E2D3C4", "B5A6C7D8", "9C8D7E6F", "11223344", "55667788"]
REQUEST_CODES = ["0A1B2C3D", "ABCDEF01", "DEADBEEF", "CAFEBABE"]


# ========== Path and File System Fixtures ==========

@pytest.fixture
def isolated_temp_dir():
    """Create an isolated temporary directory that's always cleaned up."""
    temp_dir = tempfile.mkdtemp(prefix="pager_test_")
    temp_path = Path(temp_dir)
    yield temp_path
    if temp_path.exists():
        shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def isolated_config(isolated_temp_dir, monkeypatch):
    """Point the config module at a throwaway file and clear its cache."""
    config_path = isolated_temp_dir / "config.toml"
    monkeypatch.setattr(config, "DEFAULT_CONFIG_PATH", config_path)
    monkeypatch.setattr(config, "_CONFIG_CACHE", None)
    yield config_path
    monkeypatch.setattr(config, "_CONFIG_CACHE", None)


# ========== List Data Fixtures ==========

def build_snapshot(friends: int = 0, pending: int = 0, messages: int = 0) -> ListSnapshot:
    """Snapshot with the given number of friends, pending requests and messages."""
    return ListSnapshot(
        friends=tuple(Friend(code=FRIEND_CODES[i % len(FRIEND_CODES)]) for i in range(friends)),
        pending_requests=tuple(PendingRequest(code=REQUEST_CODES[i % len(REQUEST_CODES)]) for i in range(pending)),
        messages=tuple(
            PagerMessage(sender_code=FRIEND_CODES[i % len(FRIEND_CODES)], text=f"MESSAGE {i}")
            for i in range(messages)
        ),
    )


@pytest.fixture
def make_snapshot():
    return build_snapshot


# ========== Collaborator Fakes ==========

class FakeDataSource:
    """ListDataSource whose lists tests can change between events."""

    def __init__(self, snapshot: Optional[ListSnapshot] = None):
        self.set(snapshot or build_snapshot())

    def set(self, snapshot: ListSnapshot) -> None:
        self._snapshot = snapshot

    def friends(self):
        return list(self._snapshot.friends)

    def pending_requests(self):
        return list(self._snapshot.pending_requests)

    def messages(self):
        return list(self._snapshot.messages)


class FakeClipboard:
    """ClipboardReader returning fixed text, raising, or waiting for release()."""

    def __init__(self, text: Optional[str] = "", error: Optional[Exception] = None, blocking: bool = False):
        self.text = text
        self.error = error
        self.reads = 0
        self._gate = asyncio.Event() if blocking else None

    def release(self) -> None:
        self._gate.set()

    async def read_text(self) -> str:
        self.reads += 1
        if self._gate is not None:
            await self._gate.wait()
        if self.error is not None:
            raise self.error
        return self.text


class RecordingFriendService:
    """FriendService that records calls and optionally fails them."""

    def __init__(self, error: Optional[Exception] = None):
        self.calls: List[tuple] = []
        self.error = error

    async def _record(self, name: str, code: str) -> None:
        self.calls.append((name, code))
        if self.error is not None:
            raise self.error

    async def send_request(self, code: str) -> None:
        await self._record("send", code)

    async def accept_request(self, code: str) -> None:
        await self._record("accept", code)

    async def reject_request(self, code: str) -> None:
        await self._record("reject", code)


class MemorySettings:
    """SettingsStore kept in a dict."""

    def __init__(self, **values):
        self.values = {"sound": True, "vibrate": True, **values}

    def get(self, key: str) -> bool:
        return self.values.get(key, True)

    def toggle(self, key: str) -> bool:
        self.values[key] = not self.get(key)
        return self.values[key]


@pytest.fixture
def data_source():
    return FakeDataSource(build_snapshot(friends=3, pending=2, messages=2))


@pytest.fixture
def friend_service():
    return RecordingFriendService()


@pytest.fixture
def clipboard_error():
    return ClipboardReadError("Clipboard unavailable")
