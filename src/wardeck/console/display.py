"""Terminal display for game events."""

from __future__ import annotations

from typing import Callable

from wardeck.simulation.events import GameListener
from wardeck.simulation.state import Card, GameOverReason


# Unicode card symbols
SUIT_SYMBOLS = {"H": "\u2665", "D": "\u2666", "C": "\u2663", "S": "\u2660"}

GAME_OVER_MESSAGES = {
    GameOverReason.DECK_EMPTY: "The deck is empty.",
    GameOverReason.NOT_ENOUGH_PLAYERS: "The game is over.",
    GameOverReason.WAR_ABANDONED: "There are not enough players to continue the war.",
}


def format_card(card: Card) -> str:
    """Format card with unicode suit symbol."""
    suit_symbol = SUIT_SYMBOLS.get(card.suit.value, card.suit.value)
    return f"{card.rank.value}{suit_symbol}"


def describe_card(card: Card) -> str:
    """Long form, e.g. '10 of Hearts'."""
    return f"{card.rank.value} of {card.suit.display_name}"


class TextListener(GameListener):
    """Writes one line of text per game event."""

    def __init__(self, output_fn: Callable[[str], None] = print) -> None:
        self.output_fn = output_fn

    def dealt(self, player: str, card: Card) -> None:
        self.output_fn(f"{player} dealt {describe_card(card)}.")

    def played(self, player: str, card: Card) -> None:
        self.output_fn(f"{player} played {describe_card(card)}.")

    def war_declared(self, player: str) -> None:
        self.output_fn("War!")

    def round_won(self, player: str, cards: tuple[Card, ...]) -> None:
        self.output_fn(f"{player} won the round.")

    def war_won(self, player: str, cards: tuple[Card, ...]) -> None:
        self.output_fn(f"{player} won the war.")

    def game_over(self, reason: GameOverReason) -> None:
        self.output_fn(GAME_OVER_MESSAGES[reason])


class SummaryRenderer:
    """Renders the end-of-game summary."""

    def render(
        self,
        hand_sizes: list[tuple[str, int]],
        reason: GameOverReason,
        turns: int,
    ) -> str:
        lines: list[str] = []
        lines.append(f"=== Game over after {turns} turns ({reason.value}) ===")
        for name, size in hand_sizes:
            lines.append(f"{name}: {size} cards")
        return "\n".join(lines)
