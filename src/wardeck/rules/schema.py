"""Core rule types and enumerations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ConfigurationError(ValueError):
    """Invalid game configuration."""

    pass


class Rank(Enum):
    """Playing card ranks, in deck generation order."""

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"


class Suit(Enum):
    """Playing card suits, in deck generation order."""

    SPADES = "S"
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"

    @property
    def display_name(self) -> str:
        return self.name.title()


class RankOrder(Enum):
    """Which rank table decides who wins a round or war.

    LEGACY only ranks 6 through A; lower ranks are unranked and tie
    with each other. FULL ranks 2 through A.
    """

    LEGACY = "legacy"
    FULL = "full"


@dataclass(frozen=True)
class WarConfig:
    """Game configuration."""

    player_names: tuple[str, ...]
    rank_order: RankOrder = RankOrder.LEGACY
    seed: Optional[int] = None

    def __post_init__(self):
        """Convert lists to tuples and validate."""
        if isinstance(self.player_names, list):
            object.__setattr__(self, "player_names", tuple(self.player_names))
        if isinstance(self.rank_order, str):
            object.__setattr__(self, "rank_order", RankOrder(self.rank_order))

        if not self.player_names:
            raise ConfigurationError("At least one player name is required")
        for name in self.player_names:
            if not isinstance(name, str) or not name.strip():
                raise ConfigurationError(f"Invalid player name: {name!r}")

    @property
    def player_count(self) -> int:
        return len(self.player_names)
