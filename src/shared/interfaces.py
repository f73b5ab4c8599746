"""
Shared Capability Interfaces

Contracts that entities implement to be stored in a data store or rendered
into summaries. Kept in `shared` so stores and scoreboard can both import
them without circular dependencies.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any


# Identity carried by an item that has not been added to a store yet
UNASSIGNED_ID = -1


class Persistable(ABC):
    """
    Capability for items that can live in a keyed data store.

    The store assigns the identity when the item is added; callers read it
    back through `id`. Assigning an identity is the store's job only.
    """

    @property
    @abstractmethod
    def id(self) -> int:
        """Current identity, or UNASSIGNED_ID before the item is stored"""
        pass

    @abstractmethod
    def set_id(self, item_id: int) -> None:
        """
        Assign the store identity.

        Args:
            item_id: Identity chosen by the store
        """
        pass


class Renderable(ABC):
    """Capability for items that can be rendered into summaries."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        pass

    @abstractmethod
    def __str__(self) -> str:
        pass
