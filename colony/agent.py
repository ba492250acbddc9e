"""
Process-level agent context.

One `AgentContext` lives for the lifetime of the process and owns the helpers that
need shared state: the tick clock, persisted memory, the world view, repeat
suppression, restart detection, console commands and scratch storage.
"""

from __future__ import annotations

from typing import Any, Optional

from colony.sim.memory import MemoryStore
from colony.sim.timebase import TickClock
from colony.systems.commands import CommandRegistry
from colony.systems.repeat import ConsoleSink, Decision, LogOnce, RepeatSuppressor
from colony.systems.restarts import RestartDetector
from colony.world import World


class AgentContext:
    def __init__(
        self,
        *,
        memory: Optional[MemoryStore] = None,
        clock: Optional[TickClock] = None,
        world: Optional[World] = None,
        sink: Optional[ConsoleSink] = None,
    ):
        self.memory = memory if memory is not None else MemoryStore()
        self.clock = clock if clock is not None else TickClock()
        self.world = world if world is not None else World()
        self.repeats = RepeatSuppressor(self.memory, self.clock)
        self.logger = LogOnce(self.repeats, sink)
        self.restarts = RestartDetector(self.memory, self.clock, self.world)
        self.commands = CommandRegistry()
        self._tmp: Optional[dict[str, Any]] = None

    def dont_repeat(self, message: str, namespace: str) -> Decision:
        return self.repeats.should_emit(message, namespace)

    def log_once(self, message: str, warn: bool = True) -> Decision:
        return self.logger.log_once(message, warn=warn)

    def is_first_turn(self) -> bool:
        return self.restarts.is_first_turn()

    def exec(self, *args: Any) -> Any:
        return self.commands.exec(*args)

    def get_tmp(self) -> dict[str, Any]:
        """Scratch storage for this process only (never written to memory)."""
        if self._tmp is None:
            self._tmp = {}
        return self._tmp

    def end_tick(self) -> None:
        """Write memory back; anything not saved by the end of a tick is lost on restart."""
        self.memory.save()
