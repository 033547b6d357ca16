"""
QUOTE SELECTOR

Shuffles a catalog copy and maps the countdown to one entry.
"""

import random
from typing import List, Optional, Sequence

from app.domain.errors import EmptyCatalogError


def clamp_index(days_remaining: int, length: int) -> int:
    """
    Map a day count onto a catalog index.

    Out-of-range values (negative, or past the end) fall back to the last entry.
    """
    if length <= 0:
        raise EmptyCatalogError()
    index = int(days_remaining)
    if index < 0 or index >= length:
        index = length - 1
    return index


class QuoteSelector:
    """
    Picks a quote for a given countdown.

    The random source is injectable so tests can seed it; the shuffle is
    redrawn on every call.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def shuffle(self, catalog: Sequence[str]) -> List[str]:
        shuffled = list(catalog)
        self._rng.shuffle(shuffled)
        return shuffled

    def pick(self, catalog: Sequence[str], days_remaining: int) -> str:
        if not catalog:
            raise EmptyCatalogError()
        shuffled = self.shuffle(catalog)
        return shuffled[clamp_index(days_remaining, len(shuffled))]
