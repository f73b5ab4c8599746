"""
Memory Data Store

In-memory keyed store that assigns each added item the next sequential
identity, starting at 0.

Single writer at a time: concurrent add() calls race on the counter, so
callers sharing a store across threads must serialize writes themselves.
"""

from typing import List, Optional

from shared.interfaces import UNASSIGNED_ID
from .base_store import BaseStore, Criteria, T


class MemoryDataStore(BaseStore[T]):
    """
    Identity-assigning in-memory store.

    Each instance owns its own counter. Identities are never reused.
    Items are held by reference, so lookups return the live object.
    """

    def __init__(self, store_name: str = "memory"):
        super().__init__(store_name)
        self._next_id = 0

    def add(self, item: T) -> None:
        """
        Assign the next identity to the item and store it.

        Adding an item that already carries an identity stores it again
        under a fresh one; this is logged but not prevented.

        Args:
            item: The item to store
        """
        previous_id = item.id
        if previous_id != UNASSIGNED_ID:
            self.logger.warning(
                f"Item already has id {previous_id}; storing again under id {self._next_id}"
            )

        item.set_id(self._next_id)
        self._next_id += 1
        self.data[item.id] = item

        self._update_metadata()
        self._log_transaction('add', item.id, True, {'previous_id': previous_id})
        self.logger.debug(f"Added item with id {item.id}")

    def get_by_id(self, item_id: int) -> Optional[T]:
        """
        Look up an item by identity.

        A miss returns None and is recorded as a failed 'get' transaction;
        hits are not logged.
        """
        item = self.data.get(item_id)
        if item is None:
            self._log_transaction('get', item_id, False, {'error': 'Key not found'})
        return item

    def get_all_by(self, criteria: Criteria) -> List[T]:
        return [item for item in self.data.values() if criteria(item)]
