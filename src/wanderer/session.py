"""Session layer bridging the game engine and database.

Each request builds a one-player Game on the shared World, restores the
pawn from the saved game, applies the player's chosen action and saves again.
"""

import datetime as dt
from collections.abc import Sequence

from sqlmodel import Session, select

from .engine.actions import Action
from .engine.game import Game
from .engine.observers import GameObserver, TurnOutcome
from .engine.player import Player
from .engine.strategies import ScriptedStrategy
from .engine.world import World
from .logging import get_logger
from .models import Account, SavedGame
from .users import display_name

logger = get_logger(__name__)


class TurnLog(GameObserver):
    """Keeps the notifications of the current request for rendering."""

    def __init__(self) -> None:
        self.possible_actions: list[str] = []
        self.outcomes: list[TurnOutcome] = []
        self.game_over: str | None = None

    def note_possible_actions(self, player: Player, actions: Sequence[Action]) -> None:
        self.possible_actions = [action.describe() for action in actions]

    def note_turn_outcome(self, outcome: TurnOutcome) -> None:
        self.outcomes.append(outcome)

    def note_game_over(self, reason: str, game: Game) -> None:
        self.game_over = reason


def describe_outcome(outcome: TurnOutcome) -> str:
    if not outcome.succeeded:
        return f"You cannot do that: {outcome.error}."
    if outcome.moved:
        return f"You make your way to the {outcome.destination}."
    return "Time passes."


class WandererSession:
    """Wraps an Account + SavedGame + in-memory Game."""

    def __init__(
        self,
        db_session: Session,
        account: Account,
        saved_game: SavedGame | None,
        world: World,
        goal_location_name: str | None = None,
    ):
        self.db_session = db_session
        self.account = account
        self.saved_game = saved_game
        self.world = world
        self.goal_location_name = goal_location_name
        self.log = TurnLog()
        self.game = self._new_game()

    def _new_game(self) -> Game:
        location_name = None
        turns = 0
        finished = False
        if self.saved_game is not None:
            turns = self.saved_game.turns
            finished = self.saved_game.is_finished
            if self.saved_game.location_name in self.world:
                location_name = self.saved_game.location_name
            else:
                logger.warning(
                    "saved_location_missing",
                    fingerprint=self.account.fingerprint,
                    location=self.saved_game.location_name,
                )

        game = Game(
            self.world, max_turns=None, goal_location_name=self.goal_location_name
        )
        game.attach(self.log)
        game.add_player(display_name(self.account), ScriptedStrategy(), location_name)
        game.turn = turns
        if finished:
            game.end_reason = "finished"
        return game

    @classmethod
    def load_or_create(
        cls,
        db_session: Session,
        account: Account,
        world: World,
        goal_location_name: str | None = None,
    ) -> "WandererSession":
        """Load the account's saved game, if any."""
        saved_game = db_session.exec(
            select(SavedGame).where(SavedGame.account_id == account.id)
        ).first()
        if saved_game is None:
            logger.info("new_game_started", fingerprint=account.fingerprint)
        else:
            logger.debug(
                "game_loaded", fingerprint=account.fingerprint, turns=saved_game.turns
            )
        return cls(db_session, account, saved_game, world, goal_location_name)

    @property
    def player(self) -> Player:
        return self.game.players[0]

    @property
    def is_finished(self) -> bool:
        return self.game.is_over

    def take_turn(self, description: str) -> str:
        """Perform the action with the given description, e.g. "Move north"."""
        if self.is_finished:
            return "The game is over."
        self.player.strategy.push(description)
        self.log.outcomes.clear()
        self.game.play_turn()
        message = "\n".join(describe_outcome(o) for o in self.log.outcomes)
        if self.log.game_over == "goal_reached":
            message += "\nYou have reached your goal. Well done!"
        return message

    def get_location(self):
        return self.player.location

    def get_exits(self) -> list[str]:
        return list(self.player.location.directions)

    def save(self) -> None:
        """Write the pawn's position back to the database."""
        now = dt.datetime.now(dt.UTC)
        location_name = self.player.location.name

        if self.saved_game is None:
            self.saved_game = SavedGame(
                account_id=self.account.id,
                location_name=location_name,
                turns=self.game.turn,
                is_finished=self.is_finished,
                started_at=now,
                last_played=now,
            )
            self.db_session.add(self.saved_game)
        else:
            self.saved_game.location_name = location_name
            self.saved_game.turns = self.game.turn
            self.saved_game.is_finished = self.is_finished
            self.saved_game.last_played = now

        self.db_session.commit()
        logger.debug(
            "game_saved",
            fingerprint=self.account.fingerprint,
            location=location_name,
            turns=self.game.turn,
        )

    def reset(self) -> None:
        """Start over at the initial location."""
        if self.saved_game is not None:
            self.db_session.delete(self.saved_game)
            self.db_session.commit()
            self.saved_game = None
        self.log = TurnLog()
        self.game = self._new_game()
        logger.info("game_reset", fingerprint=self.account.fingerprint)
