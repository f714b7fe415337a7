"""The game controller.

Game is the single entry point for front ends: it owns the world and the
players, runs the turn loop and decides when the game is over. Errors that
belong to a single turn are reported to observers here instead of escaping.
"""

import itertools
from collections.abc import Iterable

from ..logging import get_logger
from .errors import InvalidActionError, QuitGame
from .observers import GameObserver, TurnOutcome
from .player import Player
from .strategies import SelectActionStrategy, make_strategy
from .world import LocationRecord, World

logger = get_logger(__name__)

MAX_TURNS = 10

GAME_OVER_MAX_TURNS = "max_turns"
GAME_OVER_GOAL = "goal_reached"
GAME_OVER_QUIT = "quit"
GAME_OVER_NO_PLAYERS = "no_players"


class IdAllocator:
    """Hands out increasing ids. Each game owns its own allocator."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def allocate(self) -> int:
        return next(self._counter)


class Game:
    def __init__(
        self,
        world: World,
        *,
        max_turns: int | None = MAX_TURNS,
        goal_location_name: str | None = None,
        id_allocator: IdAllocator | None = None,
    ):
        if goal_location_name is not None:
            world.find_location(goal_location_name)
        self.world = world
        self.max_turns = max_turns
        self.goal_location_name = goal_location_name
        self.turn = 0
        self.end_reason: str | None = None
        self._ids = id_allocator or IdAllocator()
        self._players: dict[str, Player] = {}
        self._observers: list[GameObserver] = []

    @classmethod
    def from_records(
        cls,
        records: Iterable[LocationRecord],
        initial_location_name: str | None = None,
        **kwargs,
    ) -> "Game":
        return cls(World.build(records, initial_location_name), **kwargs)

    @property
    def players(self) -> list[Player]:
        return list(self._players.values())

    @property
    def is_over(self) -> bool:
        return self.end_reason is not None

    def attach(self, observer: GameObserver) -> None:
        """Register a game observer and forward it to every player."""
        if observer in self._observers:
            return
        self._observers.append(observer)
        for player in self._players.values():
            player.attach(observer)

    def detach(self, observer: GameObserver) -> None:
        if observer not in self._observers:
            return
        self._observers.remove(observer)
        for player in self._players.values():
            player.detach(observer)

    def add_player(
        self,
        name: str,
        strategy: str | SelectActionStrategy = "last",
        location_name: str | None = None,
    ) -> Player:
        if name in self._players:
            raise ValueError(f"Player {name!r} already exists")
        if isinstance(strategy, str):
            strategy = make_strategy(strategy)
        location = (
            self.world.find_location(location_name)
            if location_name
            else self.world.initial_location
        )

        player = Player(name, location, strategy, player_id=self._ids.allocate())
        for observer in self._observers:
            player.attach(observer)
            observer.note_player_added(player)
        self._players[name] = player

        logger.info(
            "player_added",
            player=name,
            player_id=player.player_id,
            strategy=type(strategy).__name__,
            location=location.name,
        )
        return player

    def get_player(self, name: str) -> Player:
        return self._players[name]

    def remove_player(self, name: str) -> Player:
        player = self._players.pop(name)
        for observer in self._observers:
            player.detach(observer)
        logger.info("player_removed", player=name)
        return player

    def _turn_failed(self, player: Player, error: Exception) -> TurnOutcome:
        outcome = TurnOutcome(
            player_name=player.name,
            turn=self.turn,
            action=None,
            source=player.location.name,
            destination=player.location.name,
            error=str(error),
        )
        logger.warning("turn_failed", player=player.name, turn=self.turn, error=str(error))
        player.note_turn_outcome(outcome)
        return outcome

    def play_turn(self) -> list[TurnOutcome]:
        """Let every player take one turn, then check for the end of the game."""
        if self.is_over:
            return []
        if not self._players:
            self._finish(GAME_OVER_NO_PLAYERS)
            return []

        self.turn += 1
        for observer in self._observers:
            observer.note_turn_started(self.turn, self)

        outcomes = []
        for player in self.players:
            try:
                outcomes.append(player.take_turn(self.turn))
            except InvalidActionError as exc:
                outcomes.append(self._turn_failed(player, exc))
            except QuitGame:
                logger.info("player_quit", player=player.name, turn=self.turn)
                self._finish(GAME_OVER_QUIT)
                return outcomes

        self._check_end_conditions()
        return outcomes

    def _check_end_conditions(self) -> None:
        if self.goal_location_name is not None and any(
            player.location.name == self.goal_location_name
            for player in self._players.values()
        ):
            self._finish(GAME_OVER_GOAL)
        elif self.max_turns is not None and self.turn >= self.max_turns:
            self._finish(GAME_OVER_MAX_TURNS)

    def _finish(self, reason: str) -> None:
        self.end_reason = reason
        logger.info("game_over", reason=reason, turn=self.turn)
        for observer in self._observers:
            observer.note_game_over(reason, self)

    def run(self) -> str:
        """Play turns until the game ends and return the reason it ended."""
        if self.max_turns is None and self.goal_location_name is None:
            raise ValueError("Game would never end: set max_turns or a goal")
        while not self.is_over:
            self.play_turn()
        return self.end_reason
