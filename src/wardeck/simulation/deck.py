"""Deck construction, shuffling and dealing."""

from __future__ import annotations

import random
from typing import Iterable, Optional

from wardeck.rules.schema import Rank, Suit
from wardeck.simulation.state import Card


DECK_SIZE = 52


class EmptyDeckError(Exception):
    """Raised when dealing from a deck with no cards left."""

    pass


def generate_deck() -> list[Card]:
    """Create the standard 52-card deck, suit-major, ids 0..51."""
    deck: list[Card] = []
    for suit in Suit:
        for rank in Rank:
            deck.append(Card(rank=rank, suit=suit, card_id=len(deck)))
    return deck


class Deck:
    """Ordered, shrinking sequence of cards dealt from the front."""

    def __init__(self, cards: Iterable[Card]) -> None:
        self._cards: list[Card] = list(cards)

    @property
    def count(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def cards(self) -> tuple[Card, ...]:
        """Snapshot of the remaining cards, front first."""
        return tuple(self._cards)

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Shuffle in place.

        Without an rng a fresh system-seeded one is used, so results are
        not reproducible; pass a seeded random.Random for that.
        """
        if rng is None:
            rng = random.Random()
        rng.shuffle(self._cards)

    def deal_card(self) -> Card:
        if not self._cards:
            raise EmptyDeckError("The deck is empty.")
        return self._cards.pop(0)
