"""Key-value store of JSON documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable


class NotFoundError(LookupError):
    """Raised when a key has no stored value."""


class JsonStore:
    """Stores JSON values by key, in memory or as files in a directory."""

    def __init__(self, root: str | Path | None = None) -> None:
        self._root = Path(root) if root is not None else None
        self._memory: dict[str, str] = {}
        if self._root is not None:
            self._root.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def _check_key(key: str) -> None:
        if not key or key in {".", ".."} or "/" in key or "\\" in key:
            raise ValueError(f"invalid storage key: {key!r}")

    def _path(self, key: str) -> Path:
        assert self._root is not None
        return self._root / f"{key}.json"

    def read_serialized(self, key: str) -> Any:
        """Return the value stored under ``key``."""
        self._check_key(key)
        if self._root is None:
            try:
                text = self._memory[key]
            except KeyError:
                raise NotFoundError(key) from None
        else:
            try:
                text = self._path(key).read_text(encoding="utf-8")
            except FileNotFoundError:
                raise NotFoundError(key) from None
        return json.loads(text)

    def write_serialized(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        self._check_key(key)
        text = json.dumps(value)
        if self._root is None:
            self._memory[key] = text
        else:
            path = self._path(key)
            temporary = path.with_suffix(".json.tmp")
            temporary.write_text(text, encoding="utf-8")
            temporary.replace(path)

    def delete(self, key: str) -> None:
        """Remove ``key``; removing a missing key is not an error."""
        self._check_key(key)
        if self._root is None:
            self._memory.pop(key, None)
        else:
            self._path(key).unlink(missing_ok=True)


def read_or_write_default(
    store: JsonStore, key: str, default_factory: Callable[[], Any]
) -> Any:
    """Read ``key``, first storing ``default_factory()`` if it does not exist."""
    try:
        return store.read_serialized(key)
    except NotFoundError:
        store.write_serialized(key, default_factory())
        return store.read_serialized(key)