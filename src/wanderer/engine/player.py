"""Players: a pawn, a strategy and the observers watching them."""

from ..logging import get_logger
from .actions import Action, MoveAction, SkipTurnAction
from .errors import NoLegalActionsError
from .observers import ObserverList, PlayerObserver, TurnOutcome
from .pawn import Pawn
from .strategies import LastActionStrategy, SelectActionStrategy
from .world import Location

logger = get_logger(__name__)


class Player:
    """Decides what its pawn does each turn."""

    def __init__(
        self,
        name: str,
        location: Location,
        strategy: SelectActionStrategy | None = None,
        player_id: int = 0,
    ):
        self.name = name
        self.player_id = player_id
        self.pawn = Pawn(location)
        self._strategy = strategy or LastActionStrategy()
        self._observers = ObserverList()

    @property
    def strategy(self) -> SelectActionStrategy:
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: SelectActionStrategy) -> None:
        if strategy is None:
            raise ValueError("A player always needs a strategy")
        self._strategy = strategy

    @property
    def location(self) -> Location:
        return self.pawn.location

    def attach(self, observer: PlayerObserver) -> None:
        self._observers.attach(observer)

    def detach(self, observer: PlayerObserver) -> None:
        self._observers.detach(observer)

    @property
    def observers(self) -> list[PlayerObserver]:
        return list(self._observers)

    def get_legal_actions(self) -> list[Action]:
        """One move per exit of the current location, then skipping the turn."""
        actions: list[Action] = [
            MoveAction(direction) for direction in self.location.directions
        ]
        actions.append(SkipTurnAction())
        self.note_possible_actions(actions)
        return actions

    def note_possible_actions(self, actions: list[Action]) -> None:
        for observer in self._observers:
            observer.note_possible_actions(self, actions)

    def note_turn_outcome(self, outcome: TurnOutcome) -> None:
        for observer in self._observers:
            observer.note_turn_outcome(outcome)

    def take_turn(self, turn: int = 0) -> TurnOutcome:
        """Select and perform one action.

        InvalidActionError from the selected action propagates; the pawn
        stays where it was.
        """
        actions = self.get_legal_actions()
        if not actions:
            raise NoLegalActionsError(f"No legal actions for {self.name}")

        action = self.strategy.select(actions, self)
        source = self.location
        self.pawn.perform(action)

        outcome = TurnOutcome(
            player_name=self.name,
            turn=turn,
            action=action.describe(),
            source=source.name,
            destination=self.location.name,
        )
        logger.debug(
            "turn_taken",
            player=self.name,
            turn=turn,
            action=outcome.action,
            location=outcome.destination,
        )
        self.note_turn_outcome(outcome)
        return outcome

    def __str__(self) -> str:
        return f"{self.name} @ {self.location.name}"

    def __repr__(self) -> str:
        return (
            f"Player(name={self.name!r}, location={self.location.name!r}, "
            f"strategy={type(self.strategy).__name__})"
        )
