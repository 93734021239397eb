from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from vocab_srs.config import settings
from vocab_srs.models.card import Card
from vocab_srs.srs.queue import DueQueue, build_due_queue, select_due


class Lang(Enum):
    EN = "en"
    FR = "fr"


@dataclass
class Learner:
    """A person studying one language pair, owning their card collection."""

    name: str
    speak: Lang = field(default_factory=lambda: Lang(settings.speak_lang))
    learn: Lang = field(default_factory=lambda: Lang(settings.learn_lang))
    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Append a card to the end of the collection."""
        self.cards.append(card)

    def due_cards(self, now: datetime | None = None) -> list[Card]:
        """Return the learner's due cards in the order they were added."""
        return select_due(self.cards, now)

    def due_queue(self, now: datetime | None = None) -> DueQueue:
        """Return a DueQueue summarising the learner's due cards."""
        return build_due_queue(self.cards, now)
