"""
Spawn cost of a creep body.
"""
from config import BODYPART_COST, INVALID_CREEP_COST


def get_creep_cost(parts: list) -> int:
    """Total energy cost of a body part list, or INVALID_CREEP_COST if any part is unknown."""
    cost = 0
    for part in parts:
        if part not in BODYPART_COST:
            return INVALID_CREEP_COST
        cost += BODYPART_COST[part]
    return cost
