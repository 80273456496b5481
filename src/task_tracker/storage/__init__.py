"""Key-value primitives the task store can persist into."""

from .memory_kv import MemoryKeyValueStorage, StorageQuotaExceeded
from .sqlite_kv import SqliteKeyValueStorage

__all__ = ["MemoryKeyValueStorage", "SqliteKeyValueStorage", "StorageQuotaExceeded"]
