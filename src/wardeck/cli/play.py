"""CLI command for running a War game in the terminal."""

from __future__ import annotations

import logging
import random

import click

from wardeck.console.display import SummaryRenderer, TextListener
from wardeck.rules.schema import ConfigurationError, RankOrder, WarConfig
from wardeck.simulation.engine import GameEngine

logger = logging.getLogger(__name__)

DEFAULT_PLAYERS = ("Player 1", "Player 2", "Player 3")


@click.command()
@click.option(
    "-p", "--player", "players",
    multiple=True,
    help="Player name (repeat for each player)",
)
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option(
    "--rank-order",
    type=click.Choice([o.value for o in RankOrder]),
    default=RankOrder.LEGACY.value,
    show_default=True,
    help="Rank table used to decide rounds and wars",
)
@click.option("-q", "--quiet", is_flag=True, help="Only print the final summary")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    players: tuple[str, ...],
    seed: int | None,
    rank_order: str,
    quiet: bool,
    verbose: bool,
):
    """Play a game of War between the given players."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    if seed is None:
        seed = random.randint(0, 2**32 - 1)

    try:
        config = WarConfig(
            player_names=players or DEFAULT_PLAYERS,
            rank_order=RankOrder(rank_order),
            seed=seed,
        )
    except ConfigurationError as e:
        raise click.BadParameter(str(e), param_hint="--player") from e

    logger.debug(f"Config: {config}")

    if not quiet:
        click.echo(f"Seed: {seed} (use --seed {seed} to replay)")
        click.echo("")

    engine = GameEngine(config)
    listener = None if quiet else TextListener(output_fn=click.echo)
    result = engine.play(listener)

    click.echo("")
    click.echo(SummaryRenderer().render(result.hand_sizes(), result.reason, result.turn_count))


if __name__ == "__main__":
    main()
