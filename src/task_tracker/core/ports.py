# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the storage primitive, clock and id source swappable and makes
testing easier.
"""

from datetime import datetime
from typing import Protocol


class KeyValueStorage(Protocol):
    """
    Local key-value primitive (browser-localStorage-like).

    - get() returns None for a missing key
    - set() / remove() may raise on any fault (quota, I/O, locked db)
    - values never expire
    """

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def remove(self, key: str) -> None: ...


class Clock(Protocol):
    """Current instant, timezone-aware."""

    def now(self) -> datetime: ...


class IdGenerator(Protocol):
    """Opaque ids, unique among all tasks created during the store's lifetime."""

    def new_id(self) -> str: ...

