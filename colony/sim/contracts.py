"""
Thin, stable data contracts for the records kept in persisted memory.

These are small "struct-like" dataclasses so:
- systems never poke at raw nested dicts scattered around the codebase
- the on-disk shape (camelCase keys) stays in one place
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


def _as_dict(value: Any) -> dict:
    return dict(value) if isinstance(value, dict) else {}


def _as_int(value: Any) -> Optional[int]:
    # bool is an int subclass but never a valid tick
    return value if isinstance(value, int) and not isinstance(value, bool) else None


@dataclass(slots=True)
class RepeatLog:
    """
    Two-generation message log.

    `log_current` holds keys seen during `time`; `log_previous` holds keys seen during
    `time - 1` (empty when the previous tick was skipped).
    """

    time: int
    log_current: dict[str, bool] = field(default_factory=dict)
    log_previous: dict[str, bool] = field(default_factory=dict)

    def rotate(self, now: int) -> None:
        if self.time == now:
            return
        self.log_previous = self.log_current if self.time + 1 == now else {}
        self.log_current = {}
        self.time = int(now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "time": int(self.time),
            "logCurrent": dict(self.log_current),
            "logPrevious": dict(self.log_previous),
        }

    @classmethod
    def from_dict(cls, d: Any) -> Optional["RepeatLog"]:
        if not isinstance(d, dict) or _as_int(d.get("time")) is None:
            return None
        return cls(
            time=d["time"],
            log_current=_as_dict(d.get("logCurrent")),
            log_previous=_as_dict(d.get("logPrevious")),
        )


@dataclass(slots=True)
class RestartEntry:
    """A restart history entry appended by this process."""

    start: int
    spawns: list[str]
    multiple_restarts_since: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"start": int(self.start), "spawns": list(self.spawns)}
        if self.multiple_restarts_since is not None:
            d["multipleRestartsSince"] = int(self.multiple_restarts_since)
        return d


_RECORD_KEYS = ("firstTurn", "spawnIds", "restarts", "multipleRestartsSince")


@dataclass(slots=True)
class RestartRecord:
    """
    Restart bookkeeping that must survive process restarts.

    `spawn_ids` is kept as loaded (it may be missing or garbage on a first run).
    `restarts` is append-only history: entries already in memory are carried through
    untouched, whatever their shape, and only new `RestartEntry`s are added.
    Keys this record doesn't know about are kept in `extra` and written back as-is.
    """

    first_turn: Optional[int] = None
    spawn_ids: Any = None
    restarts: list[Any] = field(default_factory=list)
    multiple_restarts_since: Optional[int] = None
    extra: dict[str, Any] = field(default_factory=dict)

    def has_valid_spawn_ids(self) -> bool:
        return isinstance(self.spawn_ids, list) and all(isinstance(s, str) for s in self.spawn_ids)

    def history(self) -> list[Any]:
        return [r.to_dict() if isinstance(r, RestartEntry) else r for r in self.restarts]

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = dict(self.extra)
        d["restarts"] = self.history()
        if self.first_turn is not None:
            d["firstTurn"] = int(self.first_turn)
        if self.spawn_ids is not None:
            d["spawnIds"] = self.spawn_ids
        if self.multiple_restarts_since is not None:
            d["multipleRestartsSince"] = int(self.multiple_restarts_since)
        return d

    @classmethod
    def from_dict(cls, d: Any) -> "RestartRecord":
        if not isinstance(d, dict):
            return cls()
        restarts = d.get("restarts")
        return cls(
            first_turn=_as_int(d.get("firstTurn")),
            spawn_ids=d.get("spawnIds"),
            restarts=list(restarts) if isinstance(restarts, list) else [],
            multiple_restarts_since=_as_int(d.get("multipleRestartsSince")),
            extra={k: v for k, v in d.items() if k not in _RECORD_KEYS},
        )
