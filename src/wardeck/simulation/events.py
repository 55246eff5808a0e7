"""Game events and the listener interface that receives them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from wardeck.simulation.state import Card, GameOverReason


@dataclass(frozen=True)
class CardDealt:
    """A card went from the deck to a player."""

    player_id: int
    player: str
    card: Card


@dataclass(frozen=True)
class CardPlayed:
    """A player played the front card of their hand."""

    player_id: int
    player: str
    card: Card


@dataclass(frozen=True)
class WarDeclared:
    player_id: int
    player: str


@dataclass(frozen=True)
class RoundWon:
    """A player took the pile after a round."""

    player_id: int
    player: str
    cards: tuple[Card, ...]


@dataclass(frozen=True)
class WarWon:
    """A player took the pile and all war cards."""

    player_id: int
    player: str
    cards: tuple[Card, ...]


@dataclass(frozen=True)
class CardsDiscarded:
    """Played cards that ended up in no hand and not on the pile."""

    cards: tuple[Card, ...]


@dataclass(frozen=True)
class GameOver:
    reason: GameOverReason


GameEvent = Union[
    CardDealt, CardPlayed, WarDeclared, RoundWon, WarWon, CardsDiscarded, GameOver
]


class GameListener:
    """Receives game events. Every hook is a no-op by default."""

    def dealt(self, player: str, card: Card) -> None:
        pass

    def played(self, player: str, card: Card) -> None:
        pass

    def war_declared(self, player: str) -> None:
        pass

    def round_won(self, player: str, cards: tuple[Card, ...]) -> None:
        pass

    def war_won(self, player: str, cards: tuple[Card, ...]) -> None:
        pass

    def discarded(self, cards: tuple[Card, ...]) -> None:
        pass

    def game_over(self, reason: GameOverReason) -> None:
        pass


class RecordingListener(GameListener):
    """Keeps every event it is sent, in order."""

    def __init__(self) -> None:
        self.events: list[GameEvent] = []

    def record(self, event: GameEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: type) -> list[GameEvent]:
        return [e for e in self.events if isinstance(e, event_type)]


def emit(listener: GameListener, event: GameEvent) -> None:
    """Route an event to the matching listener hook."""
    if isinstance(listener, RecordingListener):
        listener.record(event)

    if isinstance(event, CardDealt):
        listener.dealt(event.player, event.card)
    elif isinstance(event, CardPlayed):
        listener.played(event.player, event.card)
    elif isinstance(event, WarDeclared):
        listener.war_declared(event.player)
    elif isinstance(event, RoundWon):
        listener.round_won(event.player, event.cards)
    elif isinstance(event, WarWon):
        listener.war_won(event.player, event.cards)
    elif isinstance(event, CardsDiscarded):
        listener.discarded(event.cards)
    elif isinstance(event, GameOver):
        listener.game_over(event.reason)
    else:
        raise TypeError(f"Unknown event: {event!r}")
