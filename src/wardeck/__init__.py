"""Simulation of the card game War."""

from wardeck.rules.schema import Rank, Suit, RankOrder, WarConfig, ConfigurationError
from wardeck.simulation.deck import Deck, EmptyDeckError, generate_deck
from wardeck.simulation.engine import GameEngine, GameResult, play_war_game
from wardeck.simulation.state import Card, PlayerState, GameState, GameOverReason

__version__ = "0.1.0"

__all__ = [
    "Rank",
    "Suit",
    "RankOrder",
    "WarConfig",
    "ConfigurationError",
    "Deck",
    "EmptyDeckError",
    "generate_deck",
    "GameEngine",
    "GameResult",
    "play_war_game",
    "Card",
    "PlayerState",
    "GameState",
    "GameOverReason",
]
