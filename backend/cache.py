import time
from typing import Any


class TTLCache:
    """In-memory cache for upstream responses (match history, Steam summaries)."""

    def __init__(self):
        self._store: dict[str, tuple[float, Any]] = {}

    def __len__(self) -> int:
        return len(self._store)

    def get(self, key: str) -> Any | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if time.time() > expires_at:
            del self._store[key]
            return None
        return value

    def set(self, key: str, value: Any, ttl: int):
        self._store[key] = (time.time() + ttl, value)

    def clear(self):
        self._store.clear()

    def cleanup(self) -> int:
        """Drop expired entries, returns how many were removed."""
        now = time.time()
        expired = [k for k, (exp, _) in self._store.items() if now > exp]
        for k in expired:
            del self._store[k]
        return len(expired)


cache = TTLCache()
