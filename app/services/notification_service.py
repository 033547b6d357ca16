"""
NOTIFICATION SERVICE

Resolves the target group, renders the countdown and sends it.
No retries, no queueing: failures are surfaced to the caller.
"""

import logging
from datetime import datetime
from typing import Callable, Mapping

from app.domain.errors import (
    GroupResolutionError,
    GroupResolutionFailed,
    SendError,
    SendFailed,
)
from app.domain.models.notification import Occasion, OutboundMessage
from app.domain.services.countdown_formatter import CountdownFormatter
from app.infrastructure.whatsapp.gateway import ChatGateway
from app.utils.time import now_local

_logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(
        self,
        gateway: ChatGateway,
        formatter: CountdownFormatter,
        invite_links: Mapping[Occasion, str],
        clock: Callable[[], datetime] = now_local,
    ):
        self.gateway = gateway
        self.formatter = formatter
        self.invite_links = dict(invite_links)
        self.clock = clock

    async def dispatch(self, occasion: Occasion) -> OutboundMessage:
        occasion = Occasion(occasion)
        _logger.info(f"📨 Dispatching {occasion.value} countdown")

        try:
            group = await self.gateway.resolve_group_by_invite_link(
                self.invite_links[occasion]
            )
        except GroupResolutionError as exc:
            _logger.error(f"Error get info group: {exc}")
            raise GroupResolutionFailed(occasion.value, exc) from exc

        message = OutboundMessage(
            group_id=group.jid,
            text=self.formatter.render(occasion, self.clock()),
        )

        try:
            await self.gateway.send_text(message.group_id, message.text)
        except SendError as exc:
            _logger.error(f"Error sending message: {exc}")
            raise SendFailed(occasion.value, exc) from exc

        _logger.info(f"✅ {occasion.value} countdown sent to {message.group_id}")
        return message
