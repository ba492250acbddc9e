"""
Configuration settings for the colony agent utilities.
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Tick settings
TICK_MS = int(os.getenv("COLONY_TICK_MS", "1000"))  # wall-clock ms per tick when no host tick is set

# Persistence
MEMORY_DIR = os.getenv("COLONY_MEMORY_DIR", ".colony")
MEMORY_KEY_REPEAT = "dontRepeat"
MEMORY_KEY_PERMANENT = "permanent"

# Restart detection
RESTART_DEBOUNCE_TICKS = 10  # restarts closer than this are coalesced into one history entry

# Room settings
ROOM_SIZE = 50  # tiles per side
NEIGHBOR_MIN_X = 1
NEIGHBOR_MAX_X = 48
NEIGHBOR_MIN_Y = 1
NEIGHBOR_MAX_Y = 49

# Return codes
ERR_NOT_IN_RANGE = -9

# Spawning
BODYPART_COST = {
    "move": 50,
    "work": 100,
    "carry": 50,
    "attack": 80,
    "ranged_attack": 150,
    "heal": 250,
    "claim": 600,
    "tough": 10,
}
INVALID_CREEP_COST = -1
