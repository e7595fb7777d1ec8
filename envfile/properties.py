"""Process-wide property store for resolved configuration values."""

from __future__ import annotations

from threading import Lock
from typing import Optional


class PropertyStore:
    def __init__(self) -> None:
        self._lock = Lock()
        self._values: dict[str, str] = {}

    def set(self, name: str, value: str) -> None:
        with self._lock:
            self._values[name] = value

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        with self._lock:
            return self._values.get(name, default)

    def remove(self, name: str) -> Optional[str]:
        with self._lock:
            return self._values.pop(name, None)

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._values)

    def values(self) -> list[str]:
        with self._lock:
            return list(self._values.values())

    def clear(self) -> None:
        with self._lock:
            self._values.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._values

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)


properties = PropertyStore()
