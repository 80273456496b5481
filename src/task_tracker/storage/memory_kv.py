# src/task_tracker/storage/memory_kv.py

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class StorageQuotaExceeded(Exception):
    """A write would push the storage past its byte quota."""

    def __init__(self, key: str, needed: int, quota: int) -> None:
        self.key = key
        self.needed = needed
        self.quota = quota
        super().__init__(f"quota exceeded writing key={key!r}: {needed} > {quota} bytes")


class MemoryKeyValueStorage:
    """
    Process-local key-value storage.

    quota_bytes mimics the browser storage limit: the sum of UTF-8 encoded
    keys + values may not exceed it. None disables the check.
    """

    def __init__(self, quota_bytes: int | None = None) -> None:
        self._data: dict[str, str] = {}
        self._quota = quota_bytes

    @staticmethod
    def _size(key: str, value: str) -> int:
        return len(key.encode("utf-8")) + len(value.encode("utf-8"))

    def used_bytes(self) -> int:
        return sum(self._size(k, v) for k, v in self._data.items())

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self._quota is not None:
            current = self._data.get(key)
            needed = self.used_bytes() + self._size(key, value)
            if current is not None:
                needed -= self._size(key, current)
            if needed > self._quota:
                raise StorageQuotaExceeded(key, needed, self._quota)
        self._data[key] = value
        logger.debug("MemoryKeyValueStorage set key=%s bytes=%s", key, len(value))

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data
