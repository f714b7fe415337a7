"""Actions a pawn can perform.

Each action carries the data it needs and knows how to apply itself to a
pawn. Adding a new kind of action means adding a subclass here; the pawn and
the player never branch on the kind.
"""

import abc
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..logging import get_logger
from .errors import InvalidActionError

if TYPE_CHECKING:
    from .pawn import Pawn

logger = get_logger(__name__)


class Action(abc.ABC):
    """A single operation a pawn can perform."""

    @abc.abstractmethod
    def execute(self, pawn: "Pawn") -> None:
        """Apply this action to `pawn`."""

    @abc.abstractmethod
    def describe(self) -> str:
        """Text shown to the user for this action."""

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class MoveAction(Action):
    """Follow the exit in `direction` from the pawn's current location."""

    direction: str

    def execute(self, pawn: "Pawn") -> None:
        source = pawn.location
        target = source.get_connection(self.direction)
        if target is None:
            raise InvalidActionError(
                f"Cannot move {self.direction} from {source.name}"
            )
        pawn.set_location(target)
        logger.debug(
            "pawn_moved",
            direction=self.direction,
            source=source.name,
            target=target.name,
        )

    def describe(self) -> str:
        return f"Move {self.direction}"


@dataclass(frozen=True)
class SkipTurnAction(Action):
    """Do nothing this turn."""

    def execute(self, pawn: "Pawn") -> None:
        pass

    def describe(self) -> str:
        return "Skip turn"
