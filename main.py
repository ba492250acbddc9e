"""
Colony - cross-tick bookkeeping for a grid-world agent.

Usage:
    python main.py status
    python main.py tick [--ticks N] [--spawn ID ...] [--message TEXT]
    python main.py restarts

Every command works on a file-backed memory (default: $COLONY_MEMORY_DIR or .colony).
Running `tick` again with different spawn ids looks like a restart to the agent.
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from config import MEMORY_DIR, MEMORY_KEY_PERMANENT
from colony import __version__
from colony.agent import AgentContext
from colony.sim.contracts import RestartRecord
from colony.sim.memory import MemoryStore
from colony.sim.timebase import TickClock
from colony.world import RoomPosition, World

CLOCK_KEY = "clock"
HOME_ROOM = "W1N1"


def _load_memory(args: argparse.Namespace) -> MemoryStore:
    store = MemoryStore.default(root=Path(args.memory_dir))
    store.load()
    return store


def _last_tick(store: MemoryStore) -> int | None:
    clock = store.get(CLOCK_KEY) or {}
    last = clock.get("lastTick")
    return last if isinstance(last, int) else None


def cmd_status(args: argparse.Namespace) -> int:
    store = _load_memory(args)
    record = RestartRecord.from_dict(store.get(MEMORY_KEY_PERMANENT))
    out = {
        "colony_version": __version__,
        "memory_path": str(store.paths.memory_json),
        "last_tick": _last_tick(store),
        "first_turn": record.first_turn,
        "spawn_ids": record.spawn_ids if isinstance(record.spawn_ids, list) else [],
        "restarts": len(record.restarts),
        "keys": store.keys(),
    }
    print(json.dumps(out, indent=2))
    return 0


def cmd_restarts(args: argparse.Namespace) -> int:
    store = _load_memory(args)
    record = RestartRecord.from_dict(store.get(MEMORY_KEY_PERMANENT))
    print(json.dumps(record.history(), indent=2))
    return 0


def cmd_tick(args: argparse.Namespace) -> int:
    if args.ticks < 1:
        print("[colony] ERROR: --ticks must be at least 1", file=sys.stderr)
        return 2

    store = _load_memory(args)
    last = _last_tick(store)
    start = args.start if args.start is not None else (0 if last is None else last + 1)

    world = World()
    world.add_room(HOME_ROOM)
    for i, spawn_id in enumerate(args.spawn or []):
        world.add_spawn(f"Spawn{i + 1}", spawn_id, RoomPosition(25, 25 + i, HOME_ROOM))

    ctx = AgentContext(memory=store, clock=TickClock(start), world=world)
    for tick in range(start, start + args.ticks):
        ctx.clock.set_tick(tick)
        if ctx.is_first_turn() and tick == start:
            print(f"[colony] first turn detected at tick {tick}")
        ctx.log_once(f"[colony] {args.message}")
        store.set(CLOCK_KEY, {"lastTick": tick})
        ctx.end_tick()

    print(f"[colony] ran ticks {start}..{start + args.ticks - 1}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="colony", description="Cross-tick agent bookkeeping")
    ap.add_argument("--version", action="store_true", help="print version and exit")
    ap.add_argument("--memory-dir", default=MEMORY_DIR, help=f"memory directory (default: {MEMORY_DIR})")
    sp = ap.add_subparsers(dest="cmd")

    p_status = sp.add_parser("status", help="print memory summary")
    p_status.set_defaults(func=cmd_status)

    p_restarts = sp.add_parser("restarts", help="print restart history (json)")
    p_restarts.set_defaults(func=cmd_restarts)

    p_tick = sp.add_parser("tick", help="run the agent helpers for a few ticks")
    p_tick.add_argument("--ticks", type=int, default=1, help="number of ticks to run")
    p_tick.add_argument("--start", type=int, default=None, help="first tick (default: after the last recorded one)")
    p_tick.add_argument("--spawn", action="append", help="live spawn id (repeatable)")
    p_tick.add_argument("--message", default="colony online", help="message to log once per tick")
    p_tick.set_defaults(func=cmd_tick)

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    ns = ap.parse_args(argv)
    if ns.version:
        print(__version__)
        return 0
    if not hasattr(ns, "func"):
        ap.print_help()
        return 2
    return int(ns.func(ns))


if __name__ == "__main__":
    sys.exit(main())
