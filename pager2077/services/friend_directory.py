"""
In-memory friend directory.

Serves the pager's lists and handles friend requests with the same rules as
the server: well-formed codes only, no adding yourself, no duplicate
friendships or requests.
"""

from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Set

from loguru import logger

from ..Utils.errors import FriendServiceError
from ..Utils.hex_code import is_valid_hex_code
from ..state.list_data import Friend, PagerMessage, PendingRequest


class InMemoryFriendDirectory:
    """ListDataSource and FriendService kept in process memory."""

    def __init__(
        self,
        own_code: str,
        friends: Iterable[Friend] = (),
        pending_requests: Iterable[PendingRequest] = (),
        messages: Iterable[PagerMessage] = (),
        known_users: Optional[Iterable[str]] = None,
    ):
        self.own_code = own_code.upper()
        self._friends: List[Friend] = list(friends)
        self._pending: List[PendingRequest] = list(pending_requests)
        self._messages: List[PagerMessage] = list(messages)
        self._known_users: Optional[Set[str]] = (
            {code.upper() for code in known_users} if known_users is not None else None
        )
        self.outgoing_requests: List[str] = []

    @classmethod
    def demo(cls, own_code: str) -> "InMemoryFriendDirectory":
        """Directory seeded with a few friends, one request and two messages."""
        now = datetime.now()
        return cls(
            own_code=own_code,
            friends=[
                Friend(code="F1E2D3C4", online_status="online"),
                Friend(code="B5A6C7D8", online_status="offline"),
                Friend(code="9C8D7E6F", online_status="online"),
            ],
            pending_requests=[
                PendingRequest(code="0A1B2C3D", received_at=now - timedelta(minutes=5)),
            ],
            messages=[
                PagerMessage(sender_code="F1E2D3C4", text="HELLO THERE!", received_at=now - timedelta(hours=1)),
                PagerMessage(sender_code="B5A6C7D8", text="HOW ARE YOU?", received_at=now - timedelta(hours=3)),
            ],
        )

    # ListDataSource

    def friends(self) -> List[Friend]:
        return list(self._friends)

    def pending_requests(self) -> List[PendingRequest]:
        return list(self._pending)

    def messages(self) -> List[PagerMessage]:
        return list(self._messages)

    # FriendService

    async def send_request(self, code: str) -> None:
        code = str(code).upper()
        if not is_valid_hex_code(code):
            raise FriendServiceError("INVALID_HEX_CODE", f"Invalid hex code format: {code!r}")
        if code == self.own_code:
            raise FriendServiceError("CANNOT_ADD_SELF", "Cannot add yourself")
        if self._known_users is not None and code not in self._known_users:
            raise FriendServiceError("USER_NOT_FOUND", f"User {code} not found")
        if self._is_friend(code):
            raise FriendServiceError("FRIENDSHIP_EXISTS", f"Already friends with {code}")
        if code in self.outgoing_requests:
            raise FriendServiceError("DUPLICATE_REQUEST", f"Friend request to {code} already sent")

        self.outgoing_requests.append(code)
        logger.info(f"Friend request sent to {code}")

    async def accept_request(self, code: str) -> None:
        request = self._take_pending(code)
        if not self._is_friend(request.code):
            self._friends.append(Friend(code=request.code, online_status="online"))
        logger.info(f"Accepted friend request from {request.code}")

    async def reject_request(self, code: str) -> None:
        request = self._take_pending(code)
        logger.info(f"Rejected friend request from {request.code}")

    def _is_friend(self, code: str) -> bool:
        return any(friend.code == code for friend in self._friends)

    def _take_pending(self, code: str) -> PendingRequest:
        code = str(code).upper()
        for index, request in enumerate(self._pending):
            if request.code == code:
                return self._pending.pop(index)
        raise FriendServiceError("REQUEST_NOT_FOUND", f"No pending request from {code}")
