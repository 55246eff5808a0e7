"""Game simulation engine."""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence
from wardeck.rules.schema import RankOrder, WarConfig
from wardeck.simulation.deck import Deck, generate_deck
from wardeck.simulation.events import GameListener, emit
from wardeck.simulation.state import GameOverReason, GameState, PlayerState
from wardeck.simulation.war import step

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameResult:
    """Result of a simulated game."""

    reason: GameOverReason
    turn_count: int
    final_state: GameState
    history: tuple[GameState, ...]  # State before each turn, then the final one

    def __init__(
        self,
        reason: GameOverReason,
        turn_count: int,
        final_state: GameState,
        history: List[GameState]
    ) -> None:
        object.__setattr__(self, "reason", reason)
        object.__setattr__(self, "turn_count", turn_count)
        object.__setattr__(self, "final_state", final_state)
        object.__setattr__(self, "history", tuple(history))

    def hand_sizes(self) -> list[tuple[str, int]]:
        """(name, cards held) per seat at the end of the game."""
        return [(p.name, len(p.hand)) for p in self.final_state.players]


class GameEngine:
    """Runs a War game from a configuration."""

    def __init__(self, config: WarConfig) -> None:
        self.config = config

    def new_game(self, rng: Optional[random.Random] = None) -> GameState:
        """Build the opening state: shuffled deck, empty hands, empty pile.

        The deck is shuffled with rng if given, else with one seeded from
        config.seed, else with a fresh system-seeded generator.
        """
        if rng is None and self.config.seed is not None:
            rng = random.Random(self.config.seed)

        deck = Deck(generate_deck())
        deck.shuffle(rng)

        players = tuple(
            PlayerState(player_id=i, name=name)
            for i, name in enumerate(self.config.player_names)
        )
        return GameState(
            players=players,
            deck=deck.cards(),
            pile=(),
            discard=(),
            turn=0,
            active_player=0,
        )

    def play(
        self,
        listener: Optional[GameListener] = None,
        state: Optional[GameState] = None,
    ) -> GameResult:
        """Play to completion, forwarding every event to listener.

        Args:
            listener: Receives events as they happen
            state: Starting state; a fresh game if omitted
        """
        if state is None:
            state = self.new_game()

        logger.info(
            f"Starting game: players={list(self.config.player_names)}, "
            f"seed={self.config.seed}, rank_order={self.config.rank_order.value}"
        )

        history: List[GameState] = [state]
        # Each turn deals a card or ends the game, so this terminates
        while not state.is_over:
            result = step(state, self.config.rank_order)
            state = result.state
            history.append(state)
            if listener is not None:
                for event in result.events:
                    emit(listener, event)

        assert state.game_over is not None
        logger.info(f"Game over after {state.turn} turns: {state.game_over.value}")

        return GameResult(
            reason=state.game_over,
            turn_count=state.turn,
            final_state=state,
            history=history,
        )


def play_war_game(
    player_names: Sequence[str],
    seed: Optional[int] = None,
    rank_order: RankOrder = RankOrder.LEGACY,
    listener: Optional[GameListener] = None,
) -> GameResult:
    """Play a complete War game and return the result."""
    config = WarConfig(
        player_names=tuple(player_names),
        rank_order=rank_order,
        seed=seed,
    )
    return GameEngine(config).play(listener)
