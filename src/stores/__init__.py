"""
Stores Module

Provides the in-memory storage layer. Stores assign identities to items
and support lookup by identity and predicate filtering.
"""

from .base_store import BaseStore, DataStore, StoreMetadata, TransactionLogEntry
from .memory_store import MemoryDataStore

__all__ = [
    'BaseStore',
    'DataStore',
    'StoreMetadata',
    'TransactionLogEntry',
    'MemoryDataStore'
]
