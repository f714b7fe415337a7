"""Console front end: prints the game as it runs and asks the user to choose."""

from collections.abc import Sequence

import click

from .engine.actions import Action
from .engine.errors import QuitGame
from .engine.game import Game
from .engine.observers import GameObserver, TurnOutcome
from .engine.player import Player

QUIT_KEYS = ("q", "quit")


class ConsoleObserver(GameObserver):
    """Echoes game events to the terminal.

    With `interactive` set, possible actions are already shown by the
    chooser prompt, so they are not listed twice.
    """

    def __init__(self, interactive: bool = False):
        self.interactive = interactive

    def note_player_added(self, player: Player) -> None:
        click.echo(f"{player.name} joins at the {player.location.name}.")

    def note_turn_started(self, turn: int, game: Game) -> None:
        click.echo()
        click.secho(f"Turn {turn}", bold=True)
        for player in game.players:
            click.echo(f"  Player [{player}]")

    def note_possible_actions(self, player: Player, actions: Sequence[Action]) -> None:
        if self.interactive:
            return
        click.echo("Possible actions:")
        for action in actions:
            click.echo(f"  {action.describe()}")

    def note_turn_outcome(self, outcome: TurnOutcome) -> None:
        if not outcome.succeeded:
            click.secho(f"{outcome.player_name}: {outcome.error}", fg="red")
        elif outcome.moved:
            click.echo(
                f"{outcome.player_name}: {outcome.action} "
                f"({outcome.source} -> {outcome.destination})"
            )
        else:
            click.echo(f"{outcome.player_name}: {outcome.action}")

    def note_game_over(self, reason: str, game: Game) -> None:
        messages = {
            "quit": "Goodbye!",
            "goal_reached": "The goal has been reached!",
            "max_turns": f"No turns left after {game.turn} turns.",
            "no_players": "Nobody is left to play.",
        }
        click.echo()
        click.secho(messages.get(reason, "Game over."), bold=True)

    def choose(self, actions: Sequence[Action]) -> int:
        """Chooser for InteractiveStrategy: numbered menu, 'q' quits."""
        for number, action in enumerate(actions, start=1):
            click.echo(f"  {number}. {action.describe()}")
        while True:
            answer = click.prompt("Your choice", default=str(len(actions))).strip()
            if answer.lower() in QUIT_KEYS:
                raise QuitGame()
            if answer.isdigit() and 1 <= int(answer) <= len(actions):
                return int(answer) - 1
            click.echo(f"Please enter a number from 1 to {len(actions)} or 'q'.")
