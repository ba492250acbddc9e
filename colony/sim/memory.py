from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from config import MEMORY_DIR


def _atomic_write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(text, encoding="utf-8")
    os.replace(tmp, path)


@dataclass
class MemoryPaths:
    root: Path

    @property
    def memory_json(self) -> Path:
        return self.root / "memory.json"


class MemoryStore:
    """
    Persisted key-value memory shared by everything that runs within a tick.

    - values are plain JSON data (nested dicts/lists/scalars)
    - `get` hands back live references; callers mutate and `set` them back
    - without `paths` the store only lives as long as the process (tests, dry runs)
    """

    def __init__(self, paths: Optional[MemoryPaths] = None):
        self.paths = paths
        self._data: Dict[str, Any] = {}

    @classmethod
    def default(cls, *, root: Optional[Path] = None) -> "MemoryStore":
        return cls(MemoryPaths(root=Path(root) if root is not None else Path(MEMORY_DIR)))

    @property
    def persistent(self) -> bool:
        return self.paths is not None

    def load(self) -> None:
        if self.paths is None:
            return
        p = self.paths.memory_json
        if not p.exists():
            self._data = {}
            return
        raw = json.loads(p.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"memory file {p} does not hold an object")
        self._data = raw

    def save(self) -> None:
        if self.paths is None:
            return
        _atomic_write_text(self.paths.memory_json, json.dumps(self._data, indent=2, sort_keys=True))

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data.keys())

    def snapshot(self) -> Dict[str, Any]:
        """Deep copy of the current contents (safe to inspect without aliasing)."""
        return json.loads(json.dumps(self._data))
