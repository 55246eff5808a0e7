"""Rank tables and card comparison."""

from __future__ import annotations

from typing import Sequence

from wardeck.rules.schema import Rank, RankOrder
from wardeck.simulation.state import Card


# Ranks 2-5 are deliberately absent from the legacy table.
LEGACY_RANKS: tuple[Rank, ...] = (
    Rank.SIX,
    Rank.SEVEN,
    Rank.EIGHT,
    Rank.NINE,
    Rank.TEN,
    Rank.JACK,
    Rank.QUEEN,
    Rank.KING,
    Rank.ACE,
)
FULL_RANKS: tuple[Rank, ...] = tuple(Rank)

_TABLES = {
    RankOrder.LEGACY: LEGACY_RANKS,
    RankOrder.FULL: FULL_RANKS,
}


def rank_table(order: RankOrder) -> tuple[Rank, ...]:
    """Return the ranks that take part in comparison, lowest first."""
    return _TABLES[order]


def rank_index(rank: Rank, order: RankOrder = RankOrder.LEGACY) -> int:
    """Position of rank in the table, or -1 if the table does not list it."""
    table = rank_table(order)
    if rank not in table:
        return -1
    return table.index(rank)


def compare_cards(
    first: Card,
    second: Card,
    order: RankOrder = RankOrder.LEGACY,
) -> int:
    """Positive if first outranks second, negative if lower, 0 on a tie."""
    return rank_index(first.rank, order) - rank_index(second.rank, order)


def highest_card(cards: Sequence[Card], order: RankOrder = RankOrder.LEGACY) -> Card:
    """Return the highest card; on ties the earliest one wins.

    Raises:
        ValueError: If cards is empty
    """
    if not cards:
        raise ValueError("No cards to compare")

    best = cards[0]
    for card in cards:
        if compare_cards(card, best, order) > 0:
            best = card
    return best
