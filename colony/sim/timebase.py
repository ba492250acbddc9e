"""
Tick clock abstraction.

Agent code should ask a `TickClock` for the current tick rather than reading the host
directly so we can:
- drive time from the host's discrete tick counter (including skips and restarts)
- fall back to a wall-clock-derived tick when running headless without a host
"""

from __future__ import annotations

from typing import Optional

import pygame

from config import TICK_MS


class TickClock:
    """Current discrete time step, as reported by the host environment."""

    def __init__(self, tick: Optional[int] = None, *, tick_ms: int = TICK_MS):
        self._tick: Optional[int] = None if tick is None else int(tick)
        self.tick_ms = max(1, int(tick_ms))

    def set_tick(self, tick: Optional[int]) -> None:
        """
        Set the current host tick.

        If set to None, `now()` falls back to pygame's real-time ticks.
        """
        self._tick = None if tick is None else int(tick)

    def advance(self, ticks: int = 1) -> int:
        """Move an explicit tick forward (a jump > 1 simulates skipped ticks)."""
        self._tick = self.now() + int(ticks)
        return self._tick

    def now(self) -> int:
        """Return the host tick (if provided), otherwise wall-clock ms bucketed into ticks."""
        if self._tick is not None:
            return int(self._tick)
        # get_ticks() counts from pygame.init() and stays at 0 until then
        if not pygame.get_init():
            pygame.init()
        return int(pygame.time.get_ticks()) // self.tick_ms
