"""
Connection watchdog.

Polls the chat gateway and hands a lost session to the recovery policy.
Restarts are requested on every poll that observes a disconnected session.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from app.infrastructure.whatsapp.gateway import ChatGateway
from app.services.recovery import RecoveryPolicy

logger = logging.getLogger(__name__)


class ConnectionWatchdog:
    def __init__(
        self,
        gateway: ChatGateway,
        recovery: RecoveryPolicy,
        interval_seconds: float = 10.0,
    ):
        self._gateway = gateway
        self._recovery = recovery
        self._interval = interval_seconds
        self._task: Optional[asyncio.Task] = None
        self.restarts_requested = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if not self.running:
            self._task = asyncio.create_task(self._run())
            logger.info(f"👀 Connection watchdog started (every {self._interval:g}s)")

    async def stop(self) -> None:
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
            logger.info("Connection watchdog stopped")

    async def check_once(self) -> bool:
        """Single poll. Returns the observed connection state."""
        try:
            connected = await self._gateway.is_connected()
        except Exception as exc:
            logger.warning(f"Connection probe raised, treating as disconnected: {exc}")
            connected = False

        if not connected:
            logger.error("Connection lost. Restarting service...")
            self.restarts_requested += 1
            await self._recovery.restart_service()
        return connected

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            await self.check_once()
