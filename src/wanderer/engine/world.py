"""Locations and the world that owns them.

The world is built once from location records and is read-only afterwards,
so it can be shared by every player and every session.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ..logging import get_logger
from .errors import DuplicateLocationError, NoSuchDirectionError, UnknownLocationError

logger = get_logger(__name__)


@dataclass(frozen=True)
class LocationRecord:
    """Initialization data for one location: name, text and outgoing exits."""

    name: str
    description: str = ""
    connections: tuple[tuple[str, str], ...] = ()


@dataclass(eq=False)
class Location:
    """A node in the world graph. Compared by identity."""

    name: str
    description: str = ""
    _connections: dict[str, "Location"] = field(
        default_factory=dict, init=False, repr=False
    )

    def connect(self, direction: str, target: "Location") -> None:
        """Register the exit in `direction`, replacing any existing one."""
        self._connections[direction] = target

    def get_connection(self, direction: str) -> "Location | None":
        """Return the location reached by `direction`, or None."""
        return self._connections.get(direction)

    def connection(self, direction: str) -> "Location":
        target = self._connections.get(direction)
        if target is None:
            raise NoSuchDirectionError(self.name, direction)
        return target

    @property
    def directions(self) -> tuple[str, ...]:
        return tuple(self._connections)

    @property
    def connections(self) -> Mapping[str, "Location"]:
        return MappingProxyType(self._connections)

    def __str__(self) -> str:
        return self.name


class World:
    """All locations of a game, indexed by name."""

    def __init__(self, locations: dict[str, Location], initial_location_name: str):
        if initial_location_name not in locations:
            raise UnknownLocationError(initial_location_name)
        self._locations = locations
        self.initial_location_name = initial_location_name

    @classmethod
    def build(
        cls,
        records: Iterable[LocationRecord],
        initial_location_name: str | None = None,
    ) -> "World":
        """Create every location first, then wire the connections.

        Connections may name locations whose records come later in the list,
        so no connection is resolved until all locations exist.
        """
        records = list(records)
        if not records:
            raise ValueError("A world needs at least one location")

        locations: dict[str, Location] = {}
        for record in records:
            if record.name in locations:
                raise DuplicateLocationError(record.name)
            locations[record.name] = Location(record.name, record.description)

        for record in records:
            source = locations[record.name]
            for direction, target_name in record.connections:
                target = locations.get(target_name)
                if target is None:
                    raise UnknownLocationError(target_name)
                source.connect(direction, target)

        if initial_location_name is None:
            initial_location_name = records[0].name
        world = cls(locations, initial_location_name)
        logger.debug(
            "world_built",
            locations=len(locations),
            initial_location=world.initial_location_name,
        )
        return world

    def find_location(self, name: str) -> Location:
        try:
            return self._locations[name]
        except KeyError:
            raise UnknownLocationError(name) from None

    @property
    def initial_location(self) -> Location:
        return self._locations[self.initial_location_name]

    def get_initial_location(self) -> Location:
        return self.initial_location

    @property
    def locations(self) -> Mapping[str, Location]:
        return MappingProxyType(self._locations)

    def __contains__(self, name: object) -> bool:
        return name in self._locations

    def __iter__(self) -> Iterator[Location]:
        return iter(self._locations.values())

    def __len__(self) -> int:
        return len(self._locations)

    def __repr__(self) -> str:
        return (
            f"World(locations={len(self._locations)}, "
            f"initial_location={self.initial_location_name!r})"
        )


def build_world(
    records: Iterable[LocationRecord], initial_location_name: str | None = None
) -> World:
    """Build a World from location records."""
    return World.build(records, initial_location_name)
