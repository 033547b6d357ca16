import pytest

from app.domain.errors import (
    DispatchError,
    GroupResolutionError,
    GroupResolutionFailed,
    SendError,
    SendFailed,
)
from app.domain.models.notification import Occasion
from tests.conftest import INVITE_LINK, FakeGateway, fixed_clock, make_service

@pytest.mark.asyncio
async def test_dispatch_sends_countdown_to_resolved_group():
    gateway = FakeGateway()
    service = make_service(gateway)

    message = await service.dispatch(Occasion.MORNING)

    assert gateway.resolved == [INVITE_LINK]
    assert gateway.sent == [(message.group_id, message.text)]
    assert message.group_id == "120363000000000000@g.us"
    assert message.text.startswith("Tersisa *6* hari lagi,\n")


@pytest.mark.asyncio
async def test_dispatch_uses_link_configured_per_occasion():
    gateway = FakeGateway()
    service = make_service(
        gateway,
        invite_links={
            Occasion.MORNING: "https://chat.whatsapp.com/MORNINGGRP",
            Occasion.EVENING: "https://chat.whatsapp.com/EVENINGGRP",
        },
    )

    await service.dispatch(Occasion.EVENING)
    await service.dispatch(Occasion.MORNING)

    assert gateway.resolved == [
        "https://chat.whatsapp.com/EVENINGGRP",
        "https://chat.whatsapp.com/MORNINGGRP",
    ]


@pytest.mark.asyncio
async def test_resolution_failure_skips_send():
    gateway = FakeGateway(resolve_error=GroupResolutionError("revoked"))
    service = make_service(gateway)

    with pytest.raises(GroupResolutionFailed) as excinfo:
        await service.dispatch(Occasion.MORNING)

    assert excinfo.value.message == "Failed to get info group"
    assert gateway.sent == []
    assert len(gateway.resolved) == 1


@pytest.mark.asyncio
async def test_send_failure_is_reported_without_retry():
    gateway = FakeGateway(send_error=SendError("timeout"))
    service = make_service(gateway)

    with pytest.raises(SendFailed) as excinfo:
        await service.dispatch(Occasion.EVENING)

    assert isinstance(excinfo.value, DispatchError)
    assert excinfo.value.message == "Failed to send message"
    assert len(gateway.resolved) == 1


@pytest.mark.asyncio
async def test_dispatch_after_target_date_still_sends():
    gateway = FakeGateway()
    service = make_service(gateway, clock=fixed_clock(2024, 2, 20))

    message = await service.dispatch(Occasion.EVENING)

    assert message.text.startswith("Tersisa *-4* hari lagi,\n")
