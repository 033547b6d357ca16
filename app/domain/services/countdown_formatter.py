"""
COUNTDOWN FORMATTER

Computes whole days left until the target date in the notification zone
and renders the outbound text.
"""

import logging
from datetime import date, datetime, tzinfo
from typing import Callable, Optional, Sequence

from app.domain.models.notification import CountdownContext, Occasion
from app.domain.quotes import get_quotes
from app.domain.services.quote_selector import QuoteSelector
from app.utils.time import local_date

logger = logging.getLogger(__name__)

MESSAGE_TEMPLATE = "Tersisa *{days}* hari lagi,\n{quote}"


class CountdownFormatter:
    def __init__(
        self,
        target_date: date,
        zone: tzinfo,
        selector: Optional[QuoteSelector] = None,
        catalog_for: Callable[[Occasion], Sequence[str]] = get_quotes,
    ):
        self.target_date = target_date
        self.zone = zone
        self.selector = selector or QuoteSelector()
        self._catalog_for = catalog_for

    def context_for(self, now: datetime) -> CountdownContext:
        return CountdownContext(
            current_date=local_date(now, self.zone),
            target_date=self.target_date,
        )

    def days_remaining(self, now: datetime) -> int:
        return self.context_for(now).days_remaining

    def render(self, occasion: Occasion, now: datetime) -> str:
        days = self.days_remaining(now)
        if days < 0:
            logger.info(f"Target date {self.target_date} has passed ({days} days)")
        quote = self.selector.pick(self._catalog_for(occasion), days)
        return MESSAGE_TEMPLATE.format(days=days, quote=quote)
