"""
Host world model: rooms, terrain, structures and spawns.

The agent helpers only ever *query* the world; this module provides an in-process
version of those queries so the helpers can run headless (CLI, tests).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from config import ROOM_SIZE


class TileType:
    PLAIN = "plain"
    SWAMP = "swamp"
    WALL = "wall"


class LookType:
    TERRAIN = "terrain"
    STRUCTURE = "structure"
    CONSTRUCTION = "construction"


@dataclass(frozen=True, slots=True)
class RoomPosition:
    x: int
    y: int
    room_name: str


def to_position(obj: Any) -> RoomPosition:
    """
    Convert something position-like into a RoomPosition.

    Accepts a RoomPosition, anything with a `.pos` RoomPosition (spawns, creeps),
    or an `(x, y, room_name)` tuple.
    """
    if isinstance(obj, RoomPosition):
        return obj
    pos = getattr(obj, "pos", None)
    if isinstance(pos, RoomPosition):
        return pos
    if isinstance(obj, tuple) and len(obj) == 3:
        x, y, room_name = obj
        return RoomPosition(int(x), int(y), str(room_name))
    raise TypeError(f"cannot convert {obj!r} to a RoomPosition")


@dataclass(frozen=True, slots=True)
class LookResult:
    """One thing found on a tile."""

    type: str
    terrain: Optional[str] = None
    structure_type: Optional[str] = None


@dataclass
class Structure:
    structure_type: str
    pos: RoomPosition
    # Roads under construction still count as roads when examining paths.
    under_construction: bool = False


@dataclass
class Spawn:
    name: str
    id: str
    pos: RoomPosition


class Room:
    """A single room's terrain grid plus the structures standing in it."""

    def __init__(self, name: str, size: int = ROOM_SIZE):
        self.name = name
        self.size = size
        self.terrain = [[TileType.PLAIN for _ in range(size)] for _ in range(size)]
        self.structures: dict[tuple[int, int], list[Structure]] = {}

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def set_terrain(self, x: int, y: int, terrain: str) -> None:
        """Set terrain at grid position."""
        if self.in_bounds(x, y):
            self.terrain[y][x] = terrain

    def add_structure(self, structure_type: str, x: int, y: int, *, under_construction: bool = False) -> Structure:
        s = Structure(structure_type, RoomPosition(x, y, self.name), under_construction=under_construction)
        self.structures.setdefault((x, y), []).append(s)
        return s

    def _look_tile(self, x: int, y: int) -> list[LookResult]:
        if not self.in_bounds(x, y):
            return []
        out = [LookResult(type=LookType.TERRAIN, terrain=self.terrain[y][x])]
        for s in self.structures.get((x, y), []):
            kind = LookType.CONSTRUCTION if s.under_construction else LookType.STRUCTURE
            out.append(LookResult(type=kind, structure_type=s.structure_type))
        return out

    def look_at(self, pos: RoomPosition) -> list[LookResult]:
        """Everything on a single tile."""
        return self._look_tile(pos.x, pos.y)

    def look_at_area(self, top: int, left: int, bottom: int, right: int) -> dict[int, dict[int, list[LookResult]]]:
        """
        Everything on the tiles of an inclusive rectangle.

        Returns `{y: {x: [LookResult, ...]}}`; tiles outside the room map to empty lists.
        """
        return {
            y: {x: self._look_tile(x, y) for x in range(left, right + 1)}
            for y in range(top, bottom + 1)
        }


@dataclass
class World:
    """Rooms and spawns visible to the agent this tick."""

    rooms: dict[str, Room] = field(default_factory=dict)
    spawns: dict[str, Spawn] = field(default_factory=dict)

    def add_room(self, name: str) -> Room:
        room = self.rooms.get(name)
        if room is None:
            room = Room(name)
            self.rooms[name] = room
        return room

    def get_room(self, name: str) -> Room:
        return self.rooms[name]

    def add_spawn(self, name: str, spawn_id: str, pos: RoomPosition) -> Spawn:
        self.add_room(pos.room_name)
        s = Spawn(name=name, id=spawn_id, pos=pos)
        self.spawns[name] = s
        return s

    def remove_spawn(self, name: str) -> None:
        self.spawns.pop(name, None)

    def spawn_ids(self) -> list[str]:
        return [s.id for s in self.spawns.values()]
