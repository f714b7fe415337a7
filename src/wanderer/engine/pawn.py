"""The player's token on the world graph."""

from .actions import Action
from .world import Location


class Pawn:
    """Stands on exactly one location at a time."""

    def __init__(self, location: Location):
        if location is None:
            raise ValueError("A pawn must start on a location")
        self._location = location

    @property
    def location(self) -> Location:
        return self._location

    def set_location(self, location: Location) -> None:
        if location is None:
            raise ValueError("A pawn must stand on a location")
        self._location = location

    def perform(self, action: Action) -> None:
        action.execute(self)

    def __repr__(self) -> str:
        return f"Pawn(location={self._location.name!r})"
