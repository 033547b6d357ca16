"""
Chat gateway interface.

The session, transport and pairing handshake live behind this seam; the
rest of the application only needs these five calls.
"""

from typing import Protocol

from app.domain.models.notification import GroupInfo


class ChatGateway(Protocol):
    async def connect(self) -> None:
        """Establish or resume the session, waiting for QR pairing if needed."""
        ...

    async def is_connected(self) -> bool:
        ...

    async def resolve_group_by_invite_link(self, link: str) -> GroupInfo:
        ...

    async def send_text(self, group_id: str, text: str) -> None:
        ...

    async def disconnect(self) -> None:
        ...
