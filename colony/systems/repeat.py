"""
Repeat suppression across ticks, and spam-controlled console logging on top of it.

A message counts as new when it was not seen in the current tick or in the tick
right before it. State is a two-generation log kept in persisted memory so the
window survives process restarts.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from config import MEMORY_KEY_REPEAT
from colony.sim.contracts import RepeatLog
from colony.sim.memory import MemoryStore
from colony.sim.timebase import TickClock


class Decision(str, Enum):
    NEW = "new"
    DUPLICATE_SAME_TICK = "duplicate_same_tick"
    DUPLICATE_PREVIOUS_TICK = "duplicate_previous_tick"


def repeat_key(message: str, namespace: str) -> str:
    # Only the first underscore is stripped, so "ab_c" and "a_bc" share keys.
    return namespace.replace("_", "", 1) + "_" + message


class RepeatSuppressor:
    """Decides whether a (namespace, message) pair is new for this tick."""

    def __init__(self, memory: MemoryStore, clock: TickClock, *, memory_key: str = MEMORY_KEY_REPEAT):
        self.memory = memory
        self.clock = clock
        self.memory_key = memory_key

    def _load_log(self, now: int) -> RepeatLog:
        log = RepeatLog.from_dict(self.memory.get(self.memory_key))
        if log is None:
            return RepeatLog(time=now)
        log.rotate(now)
        return log

    def should_emit(self, message: str, namespace: str) -> Decision:
        now = self.clock.now()
        log = self._load_log(now)
        key = repeat_key(message, namespace)

        if key in log.log_current:
            return Decision.DUPLICATE_SAME_TICK

        log.log_current[key] = True
        self.memory.set(self.memory_key, log.to_dict())
        if key in log.log_previous:
            return Decision.DUPLICATE_PREVIOUS_TICK
        return Decision.NEW


class ConsoleSink:
    """Output sink that prints to stdout."""

    def write(self, line: str) -> None:
        print(line)


class LogOnce:
    """Console logging that drops messages already shown this tick or last tick."""

    def __init__(self, suppressor: RepeatSuppressor, sink: Optional[ConsoleSink] = None, *, namespace: str = "log"):
        self.suppressor = suppressor
        self.sink = sink if sink is not None else ConsoleSink()
        self.namespace = namespace

    def log_once(self, message: str, warn: bool = True) -> Decision:
        result = self.suppressor.should_emit(message, self.namespace)

        if result is Decision.DUPLICATE_SAME_TICK:
            if warn:
                self.sink.write(f'Warning: reusing message "{message}" in same round')
        elif result is Decision.NEW:
            self.sink.write(message)

        return result

    __call__ = log_once
