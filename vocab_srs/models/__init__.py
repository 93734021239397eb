"""Domain models for the vocabulary scheduler."""

from vocab_srs.models.card import Card
from vocab_srs.models.learner import Lang, Learner

__all__ = ["Card", "Lang", "Learner"]
