"""Immutable game state representation."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional
from wardeck.rules.schema import Rank, Suit


class GameOverReason(Enum):
    """Why a game stopped."""

    DECK_EMPTY = "deck_empty"
    NOT_ENOUGH_PLAYERS = "not_enough_players"
    WAR_ABANDONED = "war_abandoned"


@dataclass(frozen=True)
class Card:
    """Immutable playing card.

    card_id is the card's position in the generated deck and is what
    makes two cards of the same rank and suit distinguishable.
    """

    rank: Rank
    suit: Suit
    card_id: int

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"


@dataclass(frozen=True)
class PlayerState:
    """Immutable player state."""

    player_id: int
    name: str
    hand: tuple[Card, ...] = ()

    def copy_with(self, **changes) -> "PlayerState":  # type: ignore
        """Create new PlayerState with changes."""
        current = {
            "player_id": self.player_id,
            "name": self.name,
            "hand": self.hand,
        }
        current.update(changes)
        return PlayerState(**current)

    def add_card_to_hand(self, card: Card) -> "PlayerState":
        return self.copy_with(hand=self.hand + (card,))

    def add_cards_to_hand(self, cards: Iterable[Card]) -> "PlayerState":
        return self.copy_with(hand=self.hand + tuple(cards))

    def play_card(self) -> tuple[Optional[Card], "PlayerState"]:
        """Take the front card of the hand.

        Returns (None, self) when the hand is empty.
        """
        if not self.hand:
            return None, self
        return self.hand[0], self.copy_with(hand=self.hand[1:])

    def has_cards(self) -> bool:
        return len(self.hand) > 0

    def has_card(self, card: Card) -> bool:
        """True only if this exact card (by card_id) is in hand."""
        return any(held.card_id == card.card_id for held in self.hand)


@dataclass(frozen=True)
class GameState:
    """Immutable game state.

    The pile holds the cards staked this round. A staked card stays in
    its dealer's hand until played, so zones may share cards. discard
    records cards that were played and are no longer in any other zone.
    """

    players: tuple[PlayerState, ...]
    deck: tuple[Card, ...]
    pile: tuple[Card, ...]
    discard: tuple[Card, ...]
    turn: int
    active_player: int
    game_over: Optional[GameOverReason] = None

    def copy_with(self, **changes) -> "GameState":  # type: ignore
        """Create a new state with specified changes."""
        current = {
            "players": self.players,
            "deck": self.deck,
            "pile": self.pile,
            "discard": self.discard,
            "turn": self.turn,
            "active_player": self.active_player,
            "game_over": self.game_over,
        }
        current.update(changes)
        return GameState(**current)

    @property
    def is_over(self) -> bool:
        return self.game_over is not None

    def active_players(self) -> list[PlayerState]:
        """Players still holding at least one card, in seat order."""
        return [p for p in self.players if p.has_cards()]

    def accounted_card_ids(self) -> set[int]:
        """Ids of every card found in some zone."""
        ids = {c.card_id for c in self.deck}
        ids.update(c.card_id for c in self.pile)
        ids.update(c.card_id for c in self.discard)
        for player in self.players:
            ids.update(c.card_id for c in player.hand)
        return ids
