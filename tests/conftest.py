import random
from datetime import date, datetime
from typing import AsyncGenerator, List, Optional, Tuple
from zoneinfo import ZoneInfo

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from app.config import Settings
from app.domain.errors import GroupResolutionError, SendError
from app.domain.models.notification import GroupInfo, Occasion
from app.domain.services.countdown_formatter import CountdownFormatter
from app.domain.services.quote_selector import QuoteSelector
from app.main import create_app
from app.services.notification_service import NotificationService

JAKARTA = ZoneInfo("Asia/Jakarta")
TARGET_DATE = date(2024, 2, 16)
INVITE_LINK = "https://chat.whatsapp.com/TESTCODE123"


class FakeGateway:
    """In-memory ChatGateway that records calls."""

    def __init__(
        self,
        connected: bool = True,
        resolve_error: Optional[Exception] = None,
        send_error: Optional[Exception] = None,
    ):
        self.connected = connected
        self.resolve_error = resolve_error
        self.send_error = send_error
        self.connect_calls = 0
        self.disconnect_calls = 0
        self.resolved: List[str] = []
        self.sent: List[Tuple[str, str]] = []

    async def connect(self) -> None:
        self.connect_calls += 1
        self.connected = True

    async def is_connected(self) -> bool:
        return self.connected

    async def resolve_group_by_invite_link(self, link: str) -> GroupInfo:
        self.resolved.append(link)
        if self.resolve_error:
            raise self.resolve_error
        return GroupInfo(jid="120363000000000000@g.us", name="Tim Hebat")

    async def send_text(self, group_id: str, text: str) -> None:
        if self.send_error:
            raise self.send_error
        self.sent.append((group_id, text))

    async def disconnect(self) -> None:
        self.disconnect_calls += 1
        self.connected = False


class RecordingRecovery:
    def __init__(self):
        self.calls = 0

    async def restart_service(self) -> None:
        self.calls += 1


def fixed_clock(year: int, month: int, day: int, hour: int = 7):
    return lambda: datetime(year, month, day, hour, 0, tzinfo=JAKARTA)


def make_service(
    gateway: FakeGateway,
    clock=None,
    seed: int = 7,
    invite_links=None,
) -> NotificationService:
    formatter = CountdownFormatter(
        target_date=TARGET_DATE,
        zone=JAKARTA,
        selector=QuoteSelector(random.Random(seed)),
    )
    return NotificationService(
        gateway=gateway,
        formatter=formatter,
        invite_links=invite_links or {
            Occasion.MORNING: INVITE_LINK,
            Occasion.EVENING: INVITE_LINK,
        },
        clock=clock or fixed_clock(2024, 2, 10),
    )


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(
        TIMEZONE="Asia/Jakarta",
        COUNTDOWN_TARGET_DATE=TARGET_DATE,
        MORNING_GROUP_INVITE_LINK=INVITE_LINK,
        EVENING_GROUP_INVITE_LINK=INVITE_LINK,
        SCHEDULER_ENABLED=False,
        WATCHDOG_ENABLED=False,
        RESTART_ENABLED=False,
    )


@pytest.fixture()
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture()
def failing_resolve_gateway() -> FakeGateway:
    return FakeGateway(resolve_error=GroupResolutionError("link revoked"))


@pytest.fixture()
def failing_send_gateway() -> FakeGateway:
    return FakeGateway(send_error=SendError("bridge said no"))


@pytest.fixture()
def recovery() -> RecordingRecovery:
    return RecordingRecovery()


def build_test_app(test_settings: Settings, gateway: FakeGateway) -> FastAPI:
    app = create_app(test_settings, gateway=gateway)
    # ASGITransport does not run the lifespan, so wire state directly
    app.state.gateway = gateway
    app.state.notification_service = make_service(gateway)
    app.state.scheduler = None
    app.state.watchdog = None
    return app


@pytest.fixture()
async def client(test_settings, gateway) -> AsyncGenerator[AsyncClient, None]:
    app = build_test_app(test_settings, gateway)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
