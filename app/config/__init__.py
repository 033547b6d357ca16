"""
Application Settings
Load from environment variables
"""

from datetime import date
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_INVITE_LINK = "https://chat.whatsapp.com/JU0uMNWKCSI3v0ZCqp2hKu"


class Settings(BaseSettings):
    """Application settings from environment"""

    # ======================
    # Application
    # ======================
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 1323

    # ======================
    # Countdown
    # ======================
    TIMEZONE: str = "Asia/Jakarta"
    COUNTDOWN_TARGET_DATE: date = date(2024, 2, 16)

    # ======================
    # Routes & recipients
    # ======================
    MORNING_ROUTE: str = "/kalbe/morning"
    EVENING_ROUTE: str = "/kalbe/night"
    MORNING_GROUP_INVITE_LINK: str = DEFAULT_INVITE_LINK
    EVENING_GROUP_INVITE_LINK: str = DEFAULT_INVITE_LINK

    # ======================
    # Scheduler
    # ======================
    SCHEDULER_ENABLED: bool = True
    MORNING_DAYS: str = "mon-fri"
    MORNING_HOUR: int = 7
    MORNING_MINUTE: int = 0
    EVENING_DAYS: str = "*"
    EVENING_HOUR: int = 20
    EVENING_MINUTE: int = 0
    LOOPBACK_BASE_URL: str = "http://localhost:1323"
    LOOPBACK_TIMEOUT_SECONDS: float = 60.0

    # ======================
    # Watchdog
    # ======================
    WATCHDOG_ENABLED: bool = True
    WATCHDOG_INTERVAL_SECONDS: float = 10.0
    RESTART_ENABLED: bool = True
    RESTART_COMMAND: str = "sudo service wa-auto restart"

    # ======================
    # WhatsApp bridge
    # ======================
    WA_BRIDGE_URL: str = "http://localhost:3000"
    WA_SESSION: str = "default"
    WA_API_KEY: Optional[str] = None
    WA_REQUEST_TIMEOUT_SECONDS: float = 30.0
    WA_PAIRING_POLL_SECONDS: float = 2.0
    WA_PAIRING_TIMEOUT_SECONDS: float = 0.0

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="forbid",
    )


settings = Settings()
