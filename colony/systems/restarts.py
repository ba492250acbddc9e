"""
First-turn detection after a process (re)start.

A restart is recognised by fingerprinting the live spawn ids against the ids recorded
on the previous run: if memory survived, at least one id matches. The answer is
computed once per process and memoized on the detector instance; the memo is never
persisted, since its absence is exactly what a restart looks like.
"""

from __future__ import annotations

from typing import Optional

from config import MEMORY_KEY_PERMANENT, RESTART_DEBOUNCE_TICKS
from colony.sim.contracts import RestartEntry, RestartRecord
from colony.sim.memory import MemoryStore
from colony.sim.timebase import TickClock
from colony.world import World


class RestartDetector:
    def __init__(
        self,
        memory: MemoryStore,
        clock: TickClock,
        world: World,
        *,
        memory_key: str = MEMORY_KEY_PERMANENT,
        debounce_ticks: int = RESTART_DEBOUNCE_TICKS,
    ):
        self.memory = memory
        self.clock = clock
        self.world = world
        self.memory_key = memory_key
        self.debounce_ticks = int(debounce_ticks)
        self._first_turn_cache: Optional[bool] = None

    @property
    def first_turn_cache(self) -> Optional[bool]:
        """Memoized answer for this process (None until computed)."""
        return self._first_turn_cache

    @first_turn_cache.setter
    def first_turn_cache(self, value: Optional[bool]) -> None:
        self._first_turn_cache = value

    def reset(self) -> None:
        """Forget the memo, as if the process had just started."""
        self._first_turn_cache = None

    def load_record(self) -> RestartRecord:
        return RestartRecord.from_dict(self.memory.get(self.memory_key))

    def is_first_turn(self) -> bool:
        if self._first_turn_cache is not None:
            return self._first_turn_cache

        now = self.clock.now()
        record = self.load_record()

        # A missing list, or one holding anything but ids, means memory was wiped or mangled
        old_spawn_ids = record.spawn_ids if record.has_valid_spawn_ids() else None
        spawn_ids = sorted(self.world.spawn_ids())
        record.spawn_ids = spawn_ids

        if old_spawn_ids is None:
            record.first_turn = now
            record.restarts.append(RestartEntry(start=now, spawns=list(spawn_ids)))
            return self._finish(record, True)

        # Not the first turn if at least one spawn survived
        if any(s in spawn_ids for s in old_spawn_ids):
            return self._finish(record, False)

        # Restarted again shortly after the last one; don't flood the history.
        if record.first_turn is not None and now - record.first_turn < self.debounce_ticks:
            if record.multiple_restarts_since is None:
                record.multiple_restarts_since = now
            record.first_turn = now
            return self._finish(record, True)

        record.restarts.append(
            RestartEntry(
                start=now,
                spawns=list(spawn_ids),
                multiple_restarts_since=record.multiple_restarts_since,
            )
        )
        record.first_turn = now
        record.multiple_restarts_since = None
        return self._finish(record, True)

    def _finish(self, record: RestartRecord, first_turn: bool) -> bool:
        self.memory.set(self.memory_key, record.to_dict())
        self._first_turn_cache = first_turn
        return first_turn
