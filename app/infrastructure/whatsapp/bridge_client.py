"""
WhatsApp HTTP bridge client.

Talks to a WAHA-compatible bridge that owns the WhatsApp session store.
Pairing, encryption and message encoding happen inside the bridge.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import httpx

from app.domain.errors import (
    GatewayConnectionError,
    GroupResolutionError,
    SendError,
)
from app.domain.models.notification import GroupInfo

logger = logging.getLogger(__name__)

STATUS_WORKING = "WORKING"
STATUS_SCAN_QR = "SCAN_QR_CODE"
STATUS_FAILED = "FAILED"
STATUS_STOPPED = "STOPPED"


def invite_code_from_link(link: str) -> str:
    """Extract the invite code from ``https://chat.whatsapp.com/<code>``."""
    path = urlparse(link).path if "://" in link else link
    code = path.rstrip("/").rsplit("/", 1)[-1]
    if not code:
        raise GroupResolutionError(f"Invalid invite link: {link!r}")
    return code


class WhatsAppBridgeClient:
    def __init__(
        self,
        base_url: str,
        session: str = "default",
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        pairing_poll_seconds: float = 2.0,
        pairing_timeout_seconds: float = 0.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session
        self.pairing_poll_seconds = pairing_poll_seconds
        self.pairing_timeout_seconds = pairing_timeout_seconds
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["X-Api-Key"] = api_key
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )
        self._last_status: Optional[str] = None

    # ------------------------------------------------------------
    # Session
    # ------------------------------------------------------------

    async def connect(self) -> None:
        try:
            status = await self._session_status()
            if status in (None, STATUS_STOPPED, STATUS_FAILED):
                logger.info(f"Starting WhatsApp session '{self.session}'")
                resp = await self._client.post(
                    "/api/sessions/start", json={"name": self.session}
                )
                # 422 means the bridge already has it running
                if resp.status_code not in (200, 201, 422):
                    resp.raise_for_status()
            await self._wait_until_working()
        except (httpx.HTTPError, ValueError) as exc:
            raise GatewayConnectionError(f"WhatsApp bridge unreachable: {exc}") from exc

        logger.info(f"✅ WhatsApp session '{self.session}' connected")

    async def _wait_until_working(self) -> None:
        started = time.monotonic()
        last_qr: Optional[str] = None

        while True:
            status = await self._session_status()
            if status == STATUS_WORKING:
                return
            if status == STATUS_FAILED:
                raise GatewayConnectionError(f"Session '{self.session}' failed to start")

            if status == STATUS_SCAN_QR:
                qr = await self._pairing_code()
                if qr and qr != last_qr:
                    logger.info(f"QR code: {qr}")
                    last_qr = qr
            else:
                logger.info(f"Login event: {status}")

            if (
                self.pairing_timeout_seconds
                and time.monotonic() - started > self.pairing_timeout_seconds
            ):
                raise GatewayConnectionError(
                    f"Session '{self.session}' not paired after {self.pairing_timeout_seconds}s"
                )
            await asyncio.sleep(self.pairing_poll_seconds)

    async def _session_status(self) -> Optional[str]:
        resp = await self._client.get(f"/api/sessions/{self.session}")
        if resp.status_code == 404:
            self._last_status = None
            return None
        resp.raise_for_status()
        self._last_status = resp.json().get("status")
        return self._last_status

    async def _pairing_code(self) -> Optional[str]:
        resp = await self._client.get(
            f"/api/{self.session}/auth/qr", params={"format": "raw"}
        )
        if resp.status_code != 200:
            return None
        return resp.json().get("value")

    async def is_connected(self) -> bool:
        try:
            return await self._session_status() == STATUS_WORKING
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(f"Session status probe failed: {exc}")
            self._last_status = None
            return False

    async def disconnect(self) -> None:
        try:
            await self._client.post("/api/sessions/stop", json={"name": self.session, "logout": False})
        except httpx.HTTPError as exc:
            logger.warning(f"Failed to stop WhatsApp session cleanly: {exc}")
        finally:
            await self._client.aclose()
            self._last_status = STATUS_STOPPED
        logger.info(f"WhatsApp session '{self.session}' disconnected")

    # ------------------------------------------------------------
    # Messaging
    # ------------------------------------------------------------

    async def resolve_group_by_invite_link(self, link: str) -> GroupInfo:
        code = invite_code_from_link(link)
        try:
            resp = await self._client.get(
                f"/api/{self.session}/groups/join-info", params={"code": code}
            )
            resp.raise_for_status()
            payload: Dict[str, Any] = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise GroupResolutionError(f"Could not resolve invite link: {exc}") from exc

        jid = payload.get("JID") or payload.get("id")
        if isinstance(jid, dict):
            jid = jid.get("_serialized")
        if not jid:
            raise GroupResolutionError("Bridge returned group info without a JID")
        return GroupInfo(jid=str(jid), name=payload.get("Name") or payload.get("subject"))

    async def send_text(self, group_id: str, text: str) -> None:
        try:
            resp = await self._client.post(
                "/api/sendText",
                json={"session": self.session, "chatId": group_id, "text": text},
            )
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            raise SendError(f"Bridge rejected message to {group_id}: {exc}") from exc
