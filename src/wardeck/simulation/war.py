"""War turn transition.

step() plays one player's turn against an immutable GameState and
returns the successor state plus the events the turn produced.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from wardeck.rules.ranking import highest_card
from wardeck.rules.schema import RankOrder
from wardeck.simulation.deck import Deck, EmptyDeckError
from wardeck.simulation.events import (
    CardDealt,
    CardPlayed,
    CardsDiscarded,
    GameEvent,
    GameOver,
    RoundWon,
    WarDeclared,
    WarWon,
)
from wardeck.simulation.state import Card, GameOverReason, GameState, PlayerState

logger = logging.getLogger(__name__)

# Extra cards dealt to the player who declares war
WAR_DEAL_COUNT = 2


@dataclass(frozen=True)
class StepResult:
    """Successor state and the events emitted getting there."""

    state: GameState
    events: tuple[GameEvent, ...]


def is_war(card: Card, pile: Sequence[Card]) -> bool:
    """True if card's rank matches the rank of every card on the pile."""
    return all(staked.rank == card.rank for staked in pile)


def _play_front_cards(
    players: list[PlayerState],
    seats: list[int],
    events: list[GameEvent],
) -> list[tuple[int, Card]]:
    """Each seated player plays their front card. Mutates players."""
    plays: list[tuple[int, Card]] = []
    for seat in seats:
        card, players[seat] = players[seat].play_card()
        if card is not None:
            plays.append((seat, card))
            events.append(CardPlayed(seat, players[seat].name, card))
    return plays


def _winning_seat(plays: list[tuple[int, Card]], order: RankOrder) -> int:
    best = highest_card([card for _, card in plays], order)
    for seat, card in plays:
        if card.card_id == best.card_id:
            return seat
    raise ValueError(f"{best} was not played this round")


def _resolve_round(
    players: list[PlayerState],
    pile: list[Card],
    discard: list[Card],
    events: list[GameEvent],
    order: RankOrder,
) -> Optional[GameOverReason]:
    seats = [i for i, p in enumerate(players) if p.has_cards()]
    if len(seats) < 2:
        return GameOverReason.NOT_ENOUGH_PLAYERS

    plays = _play_front_cards(players, seats, events)
    winner = _winning_seat(plays, order)

    won = tuple(pile)
    players[winner] = players[winner].add_cards_to_hand(won)
    pile.clear()
    events.append(RoundWon(winner, players[winner].name, won))

    lost = tuple(
        card for _, card in plays
        if not any(p.has_card(card) for p in players)
    )
    if lost:
        discard.extend(lost)
        events.append(CardsDiscarded(lost))
    return None


def _war_showdown(
    players: list[PlayerState],
    pile: list[Card],
    events: list[GameEvent],
    order: RankOrder,
) -> Optional[GameOverReason]:
    seats = [i for i, p in enumerate(players) if p.has_cards()]
    if len(seats) < 2:
        return GameOverReason.WAR_ABANDONED

    plays = _play_front_cards(players, seats, events)
    winner = _winning_seat(plays, order)

    won = tuple(pile) + tuple(card for _, card in plays)
    players[winner] = players[winner].add_cards_to_hand(won)
    pile.clear()
    events.append(WarWon(winner, players[winner].name, won))
    return None


def step(state: GameState, order: RankOrder = RankOrder.LEGACY) -> StepResult:
    """Play the active player's turn."""
    if state.is_over:
        return StepResult(state, ())

    deck = Deck(state.deck)
    players = list(state.players)
    pile = list(state.pile)
    discard = list(state.discard)
    events: list[GameEvent] = []
    seat = state.active_player
    reason: Optional[GameOverReason] = None

    try:
        card = deck.deal_card()
        players[seat] = players[seat].add_card_to_hand(card)
        events.append(CardDealt(seat, players[seat].name, card))
        logger.debug(f"Turn {state.turn}: {players[seat].name} dealt {card}, pile={len(pile)}")

        if not pile:
            pile.append(card)
        elif is_war(card, pile):
            events.append(WarDeclared(seat, players[seat].name))
            for _ in range(WAR_DEAL_COUNT):
                war_card = deck.deal_card()
                players[seat] = players[seat].add_card_to_hand(war_card)
                events.append(CardDealt(seat, players[seat].name, war_card))
            pile.append(card)
            reason = _war_showdown(players, pile, events, order)
        else:
            pile.append(card)
            reason = _resolve_round(players, pile, discard, events, order)
    except EmptyDeckError:
        reason = GameOverReason.DECK_EMPTY

    if reason is not None:
        events.append(GameOver(reason))
        logger.debug(f"Turn {state.turn}: game over ({reason.value})")

    next_state = state.copy_with(
        players=tuple(players),
        deck=deck.cards(),
        pile=tuple(pile),
        discard=tuple(discard),
        turn=state.turn + 1,
        active_player=(seat + 1) % len(players),
        game_over=reason,
    )
    return StepResult(next_state, tuple(events))
