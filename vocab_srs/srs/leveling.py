"""Fixed-table leveling scheduler.

Each card carries a single integer level. Remembering a card moves it up
one level, forgetting it drops it back to level 0. The level selects how
many days to wait after the last review before the card is due again.

Key concepts:
- Level: 0 for new or forgotten cards, +1 per successful review, unbounded.
- Interval: whole days looked up from LEVEL_INTERVAL_DAYS, clamped to the
  last entry for levels past the end of the table.
- Due date: last review time + interval.
"""

from datetime import datetime
from enum import Enum

from vocab_srs.timeutil import days

# Interval in days, indexed by level. Levels past the end reuse the last entry.
LEVEL_INTERVAL_DAYS: tuple[int, ...] = (
    0,  # level 0: new or just forgotten, due immediately
    1,  # level 1
    2,  # level 2
    5,  # level 3
    14,  # level 4
    28,  # level 5 and above
)

MAX_TABLE_LEVEL = len(LEVEL_INTERVAL_DAYS) - 1


class ReviewOutcome(Enum):
    """Whether the learner remembered the card."""

    SUCCESS = "success"
    FAILURE = "failure"


def next_level(level: int, outcome: ReviewOutcome | str) -> int:
    """Return the level a card moves to after a review.

    Args:
        level: The card's current level.
        outcome: The review outcome, or its string value.

    Returns:
        ``level + 1`` on success, 0 on failure.
    """
    outcome = ReviewOutcome(outcome)
    if outcome is ReviewOutcome.SUCCESS:
        return level + 1
    return 0


def scheduled_days(level: int) -> int:
    """Return the review interval in days for a level."""
    if level < 0:
        raise ValueError(f"level must be non-negative, got {level}")
    return LEVEL_INTERVAL_DAYS[min(level, MAX_TABLE_LEVEL)]


def due_date(level: int, updated_at: datetime) -> datetime:
    """Return the instant a card at ``level`` last reviewed at ``updated_at`` is due."""
    return updated_at + days(scheduled_days(level))
