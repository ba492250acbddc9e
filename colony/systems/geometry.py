"""
Grid geometry helpers: distances, neighbour sampling and path composition.
"""
from __future__ import annotations

import math
from typing import Iterable, Optional, Union

from config import (
    ERR_NOT_IN_RANGE,
    NEIGHBOR_MIN_X, NEIGHBOR_MAX_X, NEIGHBOR_MIN_Y, NEIGHBOR_MAX_Y,
)
from colony.world import LookResult, LookType, Room, RoomPosition, TileType, World

# 8-neighbourhood offsets (dx, dy)
NEIGHBOR_OFFSETS = [
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
]


def distance(a: RoomPosition, b: RoomPosition) -> Union[float, int]:
    """Euclidean distance, or ERR_NOT_IN_RANGE if the points are in different rooms."""
    if a.room_name != b.room_name:
        return ERR_NOT_IN_RANGE
    return math.sqrt((b.x - a.x) ** 2 + (b.y - a.y) ** 2)


def manhattan_distance(a: RoomPosition, b: RoomPosition) -> int:
    """Manhattan distance, or ERR_NOT_IN_RANGE if the points are in different rooms."""
    if a.room_name != b.room_name:
        return ERR_NOT_IN_RANGE
    return abs(b.x - a.x) + abs(b.y - a.y)


def _has_wall(tile: Iterable[LookResult]) -> bool:
    for item in tile:
        if item.type == LookType.TERRAIN and item.terrain == TileType.WALL:
            return True
    return False


def count_empty_tiles_around(pos: RoomPosition, world: World) -> Optional[int]:
    """
    Count the neighbouring tiles of `pos` that are not walls.

    Anything that isn't wall terrain counts as free space. Returns None when `pos` is
    too close to the room edge to have a full neighbourhood.
    """
    x, y = pos.x, pos.y
    if x < NEIGHBOR_MIN_X or x > NEIGHBOR_MAX_X or y < NEIGHBOR_MIN_Y or y > NEIGHBOR_MAX_Y:
        return None

    tiles = world.get_room(pos.room_name).look_at_area(y - 1, x - 1, y + 1, x + 1)
    spaces = 0
    for dx, dy in NEIGHBOR_OFFSETS:
        if not _has_wall(tiles[y + dy][x + dx]):
            spaces += 1
    return spaces


def examine_path(path: Iterable[RoomPosition], room: Room) -> dict[str, int]:
    """
    Count the normal, road and swamp tiles along a path.

    Swamp wins over road when a tile has both; roads still being built count as roads.
    """
    conclusion = {"normal": 0, "road": 0, "swamp": 0}

    for step in path:
        is_swamp = False
        is_road = False
        for item in room.look_at(step):
            if item.type == LookType.TERRAIN and item.terrain == TileType.SWAMP:
                is_swamp = True
            elif item.type in (LookType.STRUCTURE, LookType.CONSTRUCTION) and item.structure_type == "road":
                is_road = True

        if is_swamp:
            conclusion["swamp"] += 1
        elif is_road:
            conclusion["road"] += 1
        else:
            conclusion["normal"] += 1

    return conclusion
