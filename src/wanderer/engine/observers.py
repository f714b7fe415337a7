"""Observer interfaces and the weakly-held observer list.

Players push notifications to observers without knowing what they are: a
console printer, a web session, a test recorder. Players never own their
observers; an observer that goes away is simply no longer notified.
"""

import weakref
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .actions import Action
    from .game import Game
    from .player import Player


@dataclass(frozen=True)
class TurnOutcome:
    """What happened during one player's turn."""

    player_name: str
    turn: int
    action: str | None
    source: str
    destination: str
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def moved(self) -> bool:
        return self.source != self.destination


class PlayerObserver:
    """Receives notifications from players. Override what you need."""

    def note_possible_actions(
        self, player: "Player", actions: Sequence["Action"]
    ) -> None:
        pass

    def note_turn_outcome(self, outcome: TurnOutcome) -> None:
        pass


class GameObserver(PlayerObserver):
    """Also receives game-level notifications from the controller."""

    def note_player_added(self, player: "Player") -> None:
        pass

    def note_turn_started(self, turn: int, game: "Game") -> None:
        pass

    def note_game_over(self, reason: str, game: "Game") -> None:
        pass


class ObserverList:
    """Observers in attachment order, held by weak reference."""

    def __init__(self) -> None:
        self._refs: list[weakref.ref] = []

    def attach(self, observer: PlayerObserver) -> None:
        if observer in self:
            return
        self._refs.append(weakref.ref(observer))

    def detach(self, observer: PlayerObserver) -> None:
        self._refs = [
            ref for ref in self._refs if ref() is not None and ref() is not observer
        ]

    def __contains__(self, observer: object) -> bool:
        return any(ref() is observer for ref in self._refs)

    def __iter__(self) -> Iterator[PlayerObserver]:
        """Yield live observers, dropping references to collected ones."""
        self._refs = [ref for ref in self._refs if ref() is not None]
        for ref in list(self._refs):
            observer = ref()
            if observer is not None:
                yield observer

    def __len__(self) -> int:
        return sum(1 for ref in self._refs if ref() is not None)
