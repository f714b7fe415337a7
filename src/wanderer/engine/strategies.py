"""Action-selection strategies.

A strategy picks one action from the legal actions of a turn. Players hold
one strategy at a time and can swap it while the game runs.
"""

import abc
import random
from collections import deque
from collections.abc import Callable, Iterable, Sequence
from typing import TYPE_CHECKING

from ..logging import get_logger
from .actions import Action, SkipTurnAction
from .errors import InvalidActionError, UnknownStrategyError

if TYPE_CHECKING:
    from .player import Player

logger = get_logger(__name__)

# Returns either the chosen action or its index in the offered sequence.
Chooser = Callable[[Sequence[Action]], "Action | int"]


class SelectActionStrategy(abc.ABC):
    name: str = ""

    @abc.abstractmethod
    def select(self, actions: Sequence[Action], player: "Player") -> Action:
        """Pick one of `actions` for `player`."""


class LastActionStrategy(SelectActionStrategy):
    """Always takes the last legal action."""

    name = "last"

    def select(self, actions: Sequence[Action], player: "Player") -> Action:
        return actions[-1]


class FirstActionStrategy(SelectActionStrategy):
    name = "first"

    def select(self, actions: Sequence[Action], player: "Player") -> Action:
        return actions[0]


class RandomStrategy(SelectActionStrategy):
    """Uniform pick among the legal actions."""

    name = "random"

    def __init__(self, rng: random.Random | None = None, seed: int | None = None):
        self.rng = rng or random.Random(seed)

    def select(self, actions: Sequence[Action], player: "Player") -> Action:
        return self.rng.choice(actions)


class InteractiveStrategy(SelectActionStrategy):
    """Asks an outside chooser, usually the user interface, to decide.

    The chooser may raise QuitGame to end the game.
    """

    name = "interactive"

    def __init__(self, chooser: Chooser):
        self.chooser = chooser

    def select(self, actions: Sequence[Action], player: "Player") -> Action:
        choice = self.chooser(actions)
        if isinstance(choice, Action):
            if choice not in actions:
                raise InvalidActionError(f"{choice.describe()} is not available")
            return choice
        if not 0 <= choice < len(actions):
            raise InvalidActionError(f"No action number {choice}")
        return actions[choice]


class ScriptedStrategy(SelectActionStrategy):
    """Replays a queue of action descriptions, e.g. "Move north".

    An exact description wins. Otherwise the description is matched ignoring
    case, as long as only one action matches that way. When the script runs
    out the player skips its turns.
    """

    name = "scripted"

    def __init__(self, descriptions: Iterable[str] = ()):
        self.script: deque[str] = deque(descriptions)

    def push(self, description: str) -> None:
        self.script.append(description)

    def select(self, actions: Sequence[Action], player: "Player") -> Action:
        if not self.script:
            logger.debug("script_exhausted", player=player.name)
            return SkipTurnAction()
        wanted = self.script.popleft()
        for action in actions:
            if action.describe() == wanted:
                return action
        folded = [a for a in actions if a.describe().casefold() == wanted.casefold()]
        if len(folded) > 1:
            raise InvalidActionError(f"{wanted!r} is ambiguous here")
        if not folded:
            raise InvalidActionError(f"{wanted!r} is not possible here")
        return folded[0]


_STRATEGIES: dict[str, type[SelectActionStrategy]] = {
    cls.name: cls
    for cls in (
        LastActionStrategy,
        FirstActionStrategy,
        RandomStrategy,
        InteractiveStrategy,
        ScriptedStrategy,
    )
}


def strategy_names() -> list[str]:
    return sorted(_STRATEGIES)


def make_strategy(name: str, **kwargs) -> SelectActionStrategy:
    """Create a strategy by name, passing `kwargs` to its constructor."""
    try:
        cls = _STRATEGIES[name.lower()]
    except KeyError:
        raise UnknownStrategyError(
            f"Unknown strategy {name!r}; choose one of {', '.join(strategy_names())}"
        ) from None
    return cls(**kwargs)
