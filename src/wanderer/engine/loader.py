"""Load world data from JSON into a World object.

File format:

    {
      "initial_location": "Start",
      "locations": [
        {"name": "Start", "description": "...", "connections": {"north": "Hall"}}
      ]
    }

`initial_location` is optional and defaults to the first location.
"""

import json
from importlib import resources
from pathlib import Path
from typing import Any

from .errors import WorldDataError
from .world import LocationRecord, World


def packaged_world_path(name: str) -> Path:
    """Locate a world shipped in wanderer/data by its name (without .json)."""
    return resources.files("wanderer.data").joinpath(f"{name}.json")


def packaged_world_names() -> list[str]:
    return sorted(
        entry.name.removesuffix(".json")
        for entry in resources.files("wanderer.data").iterdir()
        if entry.name.endswith(".json")
    )


def _parse_connections(name: str, connections: Any) -> tuple[tuple[str, str], ...]:
    if isinstance(connections, dict):
        pairs = list(connections.items())
    elif isinstance(connections, list):
        # Also accept a list of [direction, target] pairs.
        pairs = []
        for pair in connections:
            if not isinstance(pair, list) or len(pair) != 2:
                raise WorldDataError(
                    f"Location {name!r} has a bad connection {pair!r}"
                )
            pairs.append(tuple(pair))
    else:
        raise WorldDataError(f"Location {name!r} has malformed connections")

    for direction, target in pairs:
        if not isinstance(direction, str) or not isinstance(target, str):
            raise WorldDataError(
                f"Location {name!r} has a bad connection {[direction, target]!r}"
            )
    return tuple(pairs)


def _parse_location(index: int, data: Any) -> LocationRecord:
    if not isinstance(data, dict):
        raise WorldDataError(f"Location #{index} is not an object")
    name = data.get("name")
    if not name:
        raise WorldDataError(f"Location #{index} has no name")
    if not isinstance(name, str):
        raise WorldDataError(f"Location #{index} has a non-string name")

    description = data.get("description", "")
    if not isinstance(description, str):
        raise WorldDataError(f"Location {name!r} has a non-string description")

    return LocationRecord(
        name=name,
        description=description,
        connections=_parse_connections(name, data.get("connections", {})),
    )


def parse_world_data(data: Any) -> tuple[list[LocationRecord], str | None]:
    """Turn decoded JSON into location records and the initial location name."""
    if not isinstance(data, dict):
        raise WorldDataError("World data must be a JSON object")
    locations = data.get("locations")
    if not isinstance(locations, list) or not locations:
        raise WorldDataError("World data needs a non-empty 'locations' list")
    records = [_parse_location(i, loc) for i, loc in enumerate(locations)]

    initial = data.get("initial_location")
    if initial is not None and not isinstance(initial, str):
        raise WorldDataError("'initial_location' must be a location name")
    return records, initial


def resolve_world_path(world: str | Path) -> Path:
    """Accept either a packaged world name or a path to a JSON file."""
    path = Path(world)
    if path.suffix == ".json" or path.exists():
        return path
    if world not in packaged_world_names():
        raise WorldDataError(f"No world named {str(world)!r}")
    return packaged_world_path(str(world))


def load_world(data_path: str | Path) -> World:
    """Read a JSON world file and build the World."""
    try:
        with open(data_path, encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, ValueError) as exc:
        raise WorldDataError(f"{data_path}: {exc}") from exc
    records, initial = parse_world_data(data)
    return World.build(records, initial)
