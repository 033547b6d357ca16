"""
FastAPI Main Application with Scheduler and Connection Watchdog
Owns the chat session for the lifetime of the process
"""

import logging
import random
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.routes import health, notify
from app.config import Settings, settings
from app.core.logging import setup_logging
from app.domain.models.notification import Occasion
from app.domain.services.countdown_formatter import CountdownFormatter
from app.domain.services.quote_selector import QuoteSelector
from app.infrastructure.whatsapp.bridge_client import WhatsAppBridgeClient
from app.infrastructure.whatsapp.gateway import ChatGateway
from app.realtime.watchdog import ConnectionWatchdog
from app.scheduler.scheduler import NotificationScheduler
from app.services.notification_service import NotificationService
from app.services.recovery import CommandRestartPolicy, NoopRestartPolicy, RecoveryPolicy
from app.utils.time import get_zone, now_local

logger = logging.getLogger(__name__)


def build_gateway(config: Settings) -> WhatsAppBridgeClient:
    return WhatsAppBridgeClient(
        base_url=config.WA_BRIDGE_URL,
        session=config.WA_SESSION,
        api_key=config.WA_API_KEY,
        timeout=config.WA_REQUEST_TIMEOUT_SECONDS,
        pairing_poll_seconds=config.WA_PAIRING_POLL_SECONDS,
        pairing_timeout_seconds=config.WA_PAIRING_TIMEOUT_SECONDS,
    )


def build_recovery(config: Settings) -> RecoveryPolicy:
    if config.RESTART_ENABLED:
        return CommandRestartPolicy(config.RESTART_COMMAND)
    return NoopRestartPolicy()


def build_notification_service(
    gateway: ChatGateway,
    config: Settings,
    rng: Optional[random.Random] = None,
) -> NotificationService:
    zone = get_zone(config.TIMEZONE)
    formatter = CountdownFormatter(
        target_date=config.COUNTDOWN_TARGET_DATE,
        zone=zone,
        selector=QuoteSelector(rng),
    )
    return NotificationService(
        gateway=gateway,
        formatter=formatter,
        invite_links={
            Occasion.MORNING: config.MORNING_GROUP_INVITE_LINK,
            Occasion.EVENING: config.EVENING_GROUP_INVITE_LINK,
        },
        clock=lambda: now_local(zone),
    )


def create_app(
    config: Optional[Settings] = None,
    gateway: Optional[ChatGateway] = None,
    recovery: Optional[RecoveryPolicy] = None,
) -> FastAPI:
    config = config or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        # ===================
        # STARTUP
        # ===================
        setup_logging(config.LOG_LEVEL)
        logger.info("=" * 60)
        logger.info("🚀 Starting Countdown Notifier")
        logger.info("=" * 60)

        chat = gateway or build_gateway(config)
        logger.info("📱 Connecting WhatsApp session...")
        scheduler: Optional[NotificationScheduler] = None
        watchdog: Optional[ConnectionWatchdog] = None
        try:
            # A failed first connect aborts startup
            await chat.connect()
            app.state.gateway = chat
            app.state.notification_service = build_notification_service(chat, config)

            if config.SCHEDULER_ENABLED:
                scheduler = NotificationScheduler(config)
                scheduler.start()
            else:
                logger.info("⏰ Scheduler disabled")
            app.state.scheduler = scheduler

            if config.WATCHDOG_ENABLED:
                watchdog = ConnectionWatchdog(
                    chat,
                    recovery or build_recovery(config),
                    interval_seconds=config.WATCHDOG_INTERVAL_SECONDS,
                )
                watchdog.start()
            else:
                logger.info("👀 Watchdog disabled")
            app.state.watchdog = watchdog
        except BaseException:
            logger.error("❌ Startup failed, releasing WhatsApp session")
            if watchdog:
                await watchdog.stop()
            if scheduler:
                await scheduler.stop()
            await chat.disconnect()
            raise

        logger.info(f"✅ Listening on http://{config.API_HOST}:{config.API_PORT}")

        yield

        # ===================
        # SHUTDOWN
        # ===================
        logger.info("🛑 Shutting down Countdown Notifier...")
        if watchdog:
            await watchdog.stop()
        if scheduler:
            await scheduler.stop()
        await chat.disconnect()
        logger.info("👋 Shutdown complete")

    app = FastAPI(
        title="Countdown Notifier",
        description="Posts a daily countdown with a quote into a WhatsApp group",
        version="1.0.0",
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
        )
        return response

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"Message": "Internal server error"})

    app.include_router(notify.build_router(config), tags=["Countdown"])
    app.include_router(health.router, tags=["Health"])
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.API_HOST, port=settings.API_PORT)
