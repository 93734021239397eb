"""Due-card selection.

Filters a learner's cards down to the ones eligible for review at a given
instant. Order is preserved: cards come back in the order they were added,
not sorted by how overdue they are.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from vocab_srs.config import utcnow
from vocab_srs.timeutil import as_naive_utc

if TYPE_CHECKING:
    from vocab_srs.models.card import Card

logger = logging.getLogger(__name__)


def select_due(cards: Iterable[Card], now: datetime | None = None) -> list[Card]:
    """Return the cards due at ``now``, in their original order.

    A card is due when ``now`` is at or past its due date. No card is
    modified.

    Args:
        cards: Cards to scan.
        now: Reference instant (defaults to utcnow).

    Returns:
        The due cards.
    """
    now = as_naive_utc(now) if now else utcnow()
    return [card for card in cards if card.is_due(now)]


@dataclass
class DueQueue:
    """The due cards found by one scan of a collection."""

    due: list[Card] = field(default_factory=list)
    total: int = 0
    now: datetime | None = None

    def __len__(self) -> int:
        return len(self.due)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.due)

    @property
    def not_due(self) -> int:
        """Return how many scanned cards are still waiting."""
        return self.total - len(self.due)


def build_due_queue(cards: Iterable[Card], now: datetime | None = None) -> DueQueue:
    """Scan ``cards`` and collect the due ones into a DueQueue.

    Args:
        cards: Cards to scan.
        now: Reference instant (defaults to utcnow).

    Returns:
        A DueQueue holding the due cards and the number scanned.
    """
    now = as_naive_utc(now) if now else utcnow()
    scanned = list(cards)
    queue = DueQueue(due=select_due(scanned, now), total=len(scanned), now=now)

    logger.info(
        "Built due queue at %s: %d due of %d cards",
        now.isoformat(),
        len(queue.due),
        queue.total,
    )
    return queue
