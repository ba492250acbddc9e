"""
Agent helper systems.
"""
from .commands import CommandRegistry, NativeCommandError, UnknownCommandError
from .creep_cost import get_creep_cost
from .geometry import count_empty_tiles_around, distance, examine_path, manhattan_distance
from .repeat import ConsoleSink, Decision, LogOnce, RepeatSuppressor
from .restarts import RestartDetector
