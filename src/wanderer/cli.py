"""Command-line game runner."""

import random
import sys

import click

from .config import Config
from .console import ConsoleObserver
from .engine.errors import WandererError
from .engine.game import Game
from .engine.loader import load_world, resolve_world_path
from .engine.strategies import InteractiveStrategy, make_strategy, strategy_names
from .logging import configure_from_config, get_logger

logger = get_logger(__name__)


@click.command()
@click.option("--world", "world_name", help="Packaged world name or JSON file.")
@click.option(
    "--strategy",
    type=click.Choice(strategy_names(), case_sensitive=False),
    help="How the player picks actions.",
)
@click.option("--player", "player_name", default="Test Player", show_default=True)
@click.option("--turns", type=click.IntRange(min=1), help="Maximum number of turns.")
@click.option("--goal", help="End the game when a player reaches this location.")
@click.option("--seed", type=int, help="Seed for the random strategy.")
@click.option(
    "--script",
    multiple=True,
    help='Action for the scripted strategy, e.g. "Move north". Repeatable.',
)
def main(
    world_name: str | None,
    strategy: str | None,
    player_name: str,
    turns: int | None,
    goal: str | None,
    seed: int | None,
    script: tuple[str, ...],
) -> None:
    """Play Wanderer in the terminal."""
    config = Config.from_env()
    configure_from_config(config, stream=sys.stderr)

    strategy = (strategy or config.strategy).lower()
    observer = ConsoleObserver(interactive=strategy == "interactive")
    if strategy == "interactive":
        selector = InteractiveStrategy(observer.choose)
    elif strategy == "random":
        selector = make_strategy("random", rng=random.Random(seed))
    elif strategy == "scripted":
        selector = make_strategy("scripted", descriptions=script)
    else:
        selector = make_strategy(strategy)

    try:
        world = load_world(resolve_world_path(world_name or config.world))
        game = Game(
            world,
            max_turns=turns or config.max_turns,
            goal_location_name=goal or config.goal,
        )
    except WandererError as exc:
        raise click.ClickException(str(exc)) from exc

    game.attach(observer)
    game.add_player(player_name, selector)
    logger.info("console_game_starting", strategy=strategy, player=player_name)

    reason = game.run()
    logger.info("console_game_finished", reason=reason, turns=game.turn)
