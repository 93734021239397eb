"""Vocabulary card with its leveling state."""

import logging
from datetime import datetime

from vocab_srs.config import utcnow
from vocab_srs.srs.leveling import ReviewOutcome, due_date, next_level, scheduled_days
from vocab_srs.timeutil import as_naive_utc

logger = logging.getLogger(__name__)


class Card:
    """A word being learned, its translation, and how well it is known.

    The words and creation time are fixed at construction. Level, review
    time and repetition count change only through ``revise``.
    """

    def __init__(self, input_word: str, translation: str, now: datetime | None = None) -> None:
        """Create a level 0 card, due immediately.

        Args:
            input_word: Text in the language being learned.
            translation: Text in the language the learner speaks.
            now: Creation time (defaults to utcnow).
        """
        now = as_naive_utc(now) if now else utcnow()
        self._input_word = input_word
        self._translation = translation
        self._level = 0
        self._created_at = now
        self._updated_at = now
        self._repetition_count = 0

    def __repr__(self) -> str:
        return (
            f"Card(input_word={self._input_word!r}, translation={self._translation!r}, "
            f"level={self._level}, repetition_count={self._repetition_count}, "
            f"updated_at={self._updated_at.isoformat()})"
        )

    @property
    def input_word(self) -> str:
        return self._input_word

    @property
    def translation(self) -> str:
        return self._translation

    @property
    def level(self) -> int:
        return self._level

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def repetition_count(self) -> int:
        return self._repetition_count

    @property
    def scheduled_days(self) -> int:
        """Return the review interval in days for the current level."""
        return scheduled_days(self._level)

    @property
    def due_at(self) -> datetime:
        """Return when the card is next due for review."""
        return due_date(self._level, self._updated_at)

    def is_due(self, now: datetime | None = None) -> bool:
        """Return True if the card is due at ``now`` (inclusive)."""
        now = as_naive_utc(now) if now else utcnow()
        return now >= self.due_at

    def revise(self, outcome: ReviewOutcome | str, now: datetime | None = None) -> None:
        """Record the outcome of a review.

        Success moves the card up one level, failure resets it to level 0.
        Either way the repetition count goes up by one and the review time
        becomes ``now``.

        Args:
            outcome: Whether the learner remembered the card.
            now: When the review happened (defaults to utcnow).
        """
        now = as_naive_utc(now) if now else utcnow()
        # Review time never moves backwards.
        now = max(now, self._updated_at)
        previous_level = self._level

        self._level = next_level(self._level, outcome)
        self._repetition_count += 1
        self._updated_at = now

        logger.debug(
            "Revised %r: level %d -> %d, repetition %d, due %s",
            self._input_word,
            previous_level,
            self._level,
            self._repetition_count,
            self.due_at.isoformat(),
        )
