"""
Base Store

Abstract data store interface and a base class providing the bookkeeping
shared by all entity stores: metadata, transaction log, statistics and
snapshots. Stores assign integer identities to the items they hold.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Dict, List, Any, Optional, Callable
from datetime import datetime
from dataclasses import dataclass, field
import logging

from config.scoreboard_settings import ScoreboardSettings
from shared.interfaces import Persistable, Renderable

T = TypeVar('T', bound=Persistable)

# Predicate used by get_all_by; must only read the item
Criteria = Callable[[T], bool]


@dataclass
class StoreMetadata:
    """Metadata for store operations and tracking"""
    created_at: datetime = field(default_factory=datetime.now)
    last_modified: datetime = field(default_factory=datetime.now)
    item_count: int = 0
    store_version: str = "1.0.0"
    total_operations: int = 0


@dataclass
class TransactionLogEntry:
    """Entry in the transaction log for debugging and auditing"""
    timestamp: datetime
    operation: str  # 'add', 'get'
    key: Optional[int]
    success: bool
    details: Dict[str, Any] = field(default_factory=dict)


class DataStore(ABC, Generic[T]):
    """
    Keyed data store contract.

    Implementations assign each added item a unique integer identity and
    allow lookup by identity and filtering by predicate. A missing identity
    is a normal outcome, not an error.
    """

    @abstractmethod
    def add(self, item: T) -> None:
        """
        Add an item to the store, assigning its identity.

        Args:
            item: The item to store
        """
        pass

    @abstractmethod
    def get_by_id(self, item_id: int) -> Optional[T]:
        """
        Retrieve an item by identity.

        Args:
            item_id: Identity assigned by add()

        Returns:
            The item if found, None otherwise
        """
        pass

    @abstractmethod
    def get_all_by(self, criteria: Criteria) -> List[T]:
        """
        Get all items matching a predicate.

        Args:
            criteria: Read-only predicate evaluated against each item

        Returns:
            Matching items in ascending identity order
        """
        pass


class BaseStore(DataStore[T]):
    """
    Base class for in-memory entity stores.

    Provides:
    - Identity-keyed storage dict
    - Transaction logging
    - Consistency validation (identity matches key)
    - Snapshot and statistics for inspection
    """

    def __init__(self, store_name: str):
        """
        Initialize base store.

        Args:
            store_name: Name used for logging and snapshots
        """
        self.store_name = store_name
        self.data: Dict[int, T] = {}
        self.metadata = StoreMetadata()
        self.transaction_log: List[TransactionLogEntry] = []
        self.logger = logging.getLogger(f"Store.{store_name}")

    def exists(self, item_id: int) -> bool:
        """
        Check if an identity is present in the store.

        Args:
            item_id: Identity to check

        Returns:
            True if identity exists, False otherwise
        """
        return item_id in self.data

    def size(self) -> int:
        """
        Get the number of items in the store.

        Returns:
            Number of items currently stored
        """
        return len(self.data)

    def is_empty(self) -> bool:
        """Check if the store is empty."""
        return len(self.data) == 0

    def validate(self) -> bool:
        """
        Validate that every stored item's identity equals its key.

        Returns:
            True if data is valid, False otherwise
        """
        for key, item in self.data.items():
            if item.id != key:
                self.logger.error(f"Identity mismatch: key {key} holds item with id {item.id}")
                return False
        return True

    def get_snapshot(self) -> Dict[str, Any]:
        """
        Get a serializable snapshot of the store.

        Returns:
            Dictionary containing all store data and metadata
        """
        return {
            'store_name': self.store_name,
            'metadata': {
                'created_at': self.metadata.created_at.isoformat(),
                'last_modified': self.metadata.last_modified.isoformat(),
                'item_count': self.metadata.item_count,
                'store_version': self.metadata.store_version,
                'total_operations': self.metadata.total_operations
            },
            'data': self._serialize_data(),
            'transaction_log_size': len(self.transaction_log)
        }

    def get_transaction_log(self, limit: Optional[int] = None) -> List[TransactionLogEntry]:
        """
        Get transaction log entries.

        Args:
            limit: Maximum number of entries to return (most recent).
                None returns the whole log; 0 returns none.

        Returns:
            List of transaction log entries
        """
        if limit is None:
            return self.transaction_log.copy()
        if limit <= 0:
            return []
        return self.transaction_log[-limit:]

    def clear_transaction_log(self) -> None:
        """Clear the transaction log."""
        self.transaction_log.clear()
        self.logger.info(f"Transaction log cleared for store {self.store_name}")

    def _serialize_data(self) -> Dict[str, Any]:
        """
        Serialize store data, using to_dict() where items support it.

        Keys are stringified so the result is JSON-safe.
        """
        serialized = {}
        for key, item in self.data.items():
            if isinstance(item, Renderable):
                serialized[str(key)] = item.to_dict()
            else:
                serialized[str(key)] = repr(item)
        return serialized

    def _update_metadata(self) -> None:
        """Update store metadata after operations."""
        self.metadata.last_modified = datetime.now()
        self.metadata.item_count = len(self.data)
        self.metadata.total_operations += 1

    def _log_transaction(self, operation: str, key: Optional[int],
                        success: bool, details: Optional[Dict[str, Any]] = None) -> None:
        """
        Log a transaction for audit and debugging.

        Args:
            operation: Type of operation performed
            key: Identity involved in the operation
            success: Whether operation succeeded
            details: Additional details about the operation
        """
        if not ScoreboardSettings.TRACK_TRANSACTIONS:
            return

        entry = TransactionLogEntry(
            timestamp=datetime.now(),
            operation=operation,
            key=key,
            success=success,
            details=details or {}
        )
        self.transaction_log.append(entry)

        if not success:
            self.logger.warning(f"Failed operation: {operation} on key {key}")

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get statistics about the store.

        Returns:
            Dictionary of store statistics
        """
        successful_ops = sum(1 for entry in self.transaction_log if entry.success)
        failed_ops = len(self.transaction_log) - successful_ops

        return {
            'store_name': self.store_name,
            'item_count': self.size(),
            'total_operations': self.metadata.total_operations,
            'successful_operations': successful_ops,
            'failed_operations': failed_ops,
            'created_at': self.metadata.created_at.isoformat(),
            'last_modified': self.metadata.last_modified.isoformat()
        }
