"""Exceptions raised by the game engine."""


class WandererError(Exception):
    """Base class for all engine errors."""


class UnknownLocationError(WandererError, LookupError):
    """A location name could not be resolved in the world."""

    def __init__(self, name: str):
        super().__init__(f"Unknown location: {name!r}")
        self.name = name


class DuplicateLocationError(WandererError, ValueError):
    """Two location records share the same name."""

    def __init__(self, name: str):
        super().__init__(f"Duplicate location: {name!r}")
        self.name = name


class NoSuchDirectionError(WandererError, LookupError):
    """A location has no outgoing connection in the given direction."""

    def __init__(self, location_name: str, direction: str):
        super().__init__(f"No connection {direction!r} from {location_name!r}")
        self.location_name = location_name
        self.direction = direction


class InvalidActionError(WandererError):
    """An action cannot be performed by the pawn in its current state."""


class NoLegalActionsError(WandererError):
    """Legal-action enumeration produced nothing. Always a bug."""


class UnknownStrategyError(WandererError, ValueError):
    """No strategy is registered under the requested name."""


class WorldDataError(WandererError, ValueError):
    """World data could not be parsed into location records."""


class QuitGame(WandererError):
    """Raised by a strategy or UI to end the game early."""
