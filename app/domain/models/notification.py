"""
DOMAIN MODELS — NOTIFICATION

Pure, immutable structures for the countdown notifications.
This layer contains NO transport or scheduling logic.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class Occasion(str, Enum):
    """Scheduled notification slot. The value is used in logs and job ids."""
    MORNING = "morning"
    EVENING = "night"


@dataclass(frozen=True)
class CountdownContext:
    """
    Dates used to compute the countdown, both local to the notification zone.
    """
    current_date: date
    target_date: date

    @property
    def days_remaining(self) -> int:
        # Negative once the target date has passed
        return (self.target_date - self.current_date).days


@dataclass(frozen=True)
class GroupInfo:
    """Group resolved from an invite link."""
    jid: str
    name: str | None = None


@dataclass(frozen=True)
class OutboundMessage:
    """
    Text about to be delivered to a group. Built per dispatch, never stored.
    """
    group_id: str
    text: str
