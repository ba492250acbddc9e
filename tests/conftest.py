"""
Shared fixtures for colony tests.
Everything runs against in-process memory unless a test asks for a temp directory.
"""
from __future__ import annotations

import os

import pytest

from colony.agent import AgentContext
from colony.sim.memory import MemoryStore
from colony.sim.timebase import TickClock
from colony.world import RoomPosition, World

ROOM = "W1N1"

# Headless pygame for the wall-clock tick fallback.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class RecordingSink:
    def __init__(self):
        self.lines: list[str] = []

    def write(self, line: str) -> None:
        self.lines.append(line)


class RecordingMemoryStore(MemoryStore):
    """In-process store that remembers which keys were written."""

    def __init__(self):
        super().__init__()
        self.writes: list[str] = []

    def set(self, key, value) -> None:
        self.writes.append(key)
        super().set(key, value)


@pytest.fixture
def memory() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def recording_memory() -> RecordingMemoryStore:
    return RecordingMemoryStore()


@pytest.fixture
def clock() -> TickClock:
    return TickClock(100)


@pytest.fixture
def world() -> World:
    w = World()
    w.add_room(ROOM)
    w.add_spawn("Spawn1", "spawn-a", RoomPosition(25, 25, ROOM))
    return w


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def ctx(memory, clock, world, sink) -> AgentContext:
    return AgentContext(memory=memory, clock=clock, world=world, sink=sink)
