import random
from datetime import date, datetime, timedelta

import pytest
from httpx import AsyncClient, ASGITransport

from app.config import Settings
from app.main import build_notification_service, create_app
from app.domain.models.notification import Occasion
from app.scheduler.scheduler import NotificationScheduler
from tests.conftest import JAKARTA, FakeGateway

MORNING_LINK = "https://chat.whatsapp.com/MORNINGGROUP1"
EVENING_LINK = "https://chat.whatsapp.com/EVENINGGROUP2"


def _today_jakarta() -> date:
    return datetime.now(JAKARTA).date()


def _wired_client(config: Settings, gateway: FakeGateway) -> AsyncClient:
    app = create_app(config, gateway=gateway)
    app.state.gateway = gateway
    app.state.notification_service = build_notification_service(
        gateway, config, rng=random.Random(3)
    )
    app.state.scheduler = None
    app.state.watchdog = None
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture()
def wired_settings() -> Settings:
    return Settings(
        TIMEZONE="Asia/Jakarta",
        COUNTDOWN_TARGET_DATE=_today_jakarta() + timedelta(days=3),
        MORNING_GROUP_INVITE_LINK=MORNING_LINK,
        EVENING_GROUP_INVITE_LINK=EVENING_LINK,
        MORNING_ROUTE="/custom/morning",
        EVENING_ROUTE="/custom/evening",
        SCHEDULER_ENABLED=False,
        WATCHDOG_ENABLED=False,
        RESTART_ENABLED=False,
    )


@pytest.mark.asyncio
@pytest.mark.integration
async def test_each_route_resolves_its_own_group(wired_settings):
    gateway = FakeGateway()

    async with _wired_client(wired_settings, gateway) as ac:
        morning = await ac.get("/custom/morning")
        evening = await ac.get("/custom/evening")

    assert morning.status_code == 200
    assert evening.status_code == 200
    assert gateway.resolved == [MORNING_LINK, EVENING_LINK]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_message_counts_down_to_configured_target(wired_settings):
    gateway = FakeGateway()

    before = (wired_settings.COUNTDOWN_TARGET_DATE - _today_jakarta()).days
    async with _wired_client(wired_settings, gateway) as ac:
        resp = await ac.get("/custom/evening")
    after = (wired_settings.COUNTDOWN_TARGET_DATE - _today_jakarta()).days

    assert resp.status_code == 200
    text = gateway.sent[0][1]
    assert any(text.startswith(f"Tersisa *{days}* hari lagi,\n") for days in {before, after})


@pytest.mark.asyncio
@pytest.mark.integration
async def test_scheduler_routes_match_app_routes(wired_settings):
    gateway = FakeGateway()
    scheduler = NotificationScheduler(wired_settings)

    async with _wired_client(wired_settings, gateway) as ac:
        for occasion in Occasion:
            route = scheduler.get_job(occasion).args[0]
            resp = await ac.get(route)
            assert resp.status_code == 200, route

    assert len(gateway.sent) == 2


@pytest.mark.asyncio
@pytest.mark.integration
async def test_default_routes_not_served_when_overridden(wired_settings):
    async with _wired_client(wired_settings, FakeGateway()) as ac:
        resp = await ac.get("/kalbe/morning")

    assert resp.status_code == 404
