"""In-memory item registry."""

import logging
from threading import Lock
from typing import Iterable, List, Optional

from .errors import ItemNotFoundError, ItemValidationError
from .models import IdStrategy, Item

logger = logging.getLogger(__name__)

DEFAULT_ITEMS = (
    Item(id=1, name="Item 1", description="First item"),
    Item(id=2, name="Item 2", description="Second item"),
)


class ItemRegistry:
    """Ordered collection of items with identifier assignment.

    Every operation holds a single lock, so the registry can be shared by
    request handlers running in FastAPI's worker threads. Items are copied
    on the way in and out; callers never hold a reference to stored state.
    """

    def __init__(
        self,
        items: Optional[Iterable[Item]] = None,
        id_strategy: IdStrategy = IdStrategy.MONOTONIC,
    ):
        """Initialize the registry.

        Args:
            items: Initial items, kept in the given order
            id_strategy: Identifier assignment strategy for new items

        Raises:
            ValueError: If initial items contain duplicate ids
        """
        self._items: List[Item] = [item.model_copy() for item in items or ()]
        self._lock = Lock()
        self.id_strategy = id_strategy

        ids = [item.id for item in self._items]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate item ids in initial items: {ids}")
        self._next_id = max(ids, default=0) + 1

    @classmethod
    def with_defaults(cls, id_strategy: IdStrategy = IdStrategy.MONOTONIC) -> "ItemRegistry":
        """Create a registry seeded with the two example items."""
        return cls(DEFAULT_ITEMS, id_strategy=id_strategy)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _index_of(self, item_id: int) -> int:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        raise ItemNotFoundError(item_id)

    def _assign_id(self) -> int:
        if self.id_strategy == IdStrategy.LAST_PLUS_ONE:
            return self._items[-1].id + 1 if self._items else 1

        item_id = self._next_id
        self._next_id += 1
        return item_id

    def list_all(self) -> List[Item]:
        """Return all items in insertion order."""
        with self._lock:
            return [item.model_copy() for item in self._items]

    def get_by_id(self, item_id: int) -> Item:
        """Get an item by ID.

        Raises:
            ItemNotFoundError: If no item has this ID
        """
        with self._lock:
            item = self._items[self._index_of(item_id)]
            logger.debug(f"Fetched item {item_id}")
            return item.model_copy()

    def create(self, name: Optional[str], description: Optional[str] = None) -> Item:
        """Create and append a new item.

        Args:
            name: Item name, must be non-empty
            description: Item description, defaults to an empty string

        Returns:
            The created item

        Raises:
            ItemValidationError: If name is missing or empty
        """
        if not name:
            raise ItemValidationError("name")

        with self._lock:
            item = Item(id=self._assign_id(), name=name, description=description or "")
            self._items.append(item)
            logger.info(f"Created item {item.id}")
            return item.model_copy()

    def update(
        self,
        item_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Item:
        """Update fields of an existing item.

        Fields passed as None keep their current value. The item ID never changes.

        Raises:
            ItemNotFoundError: If no item has this ID
        """
        with self._lock:
            index = self._index_of(item_id)
            changes = {}
            if name is not None:
                changes["name"] = name
            if description is not None:
                changes["description"] = description

            item = self._items[index].model_copy(update=changes)
            self._items[index] = item
            logger.info(f"Updated item {item_id} fields: {sorted(changes)}")
            return item.model_copy()

    def delete(self, item_id: int) -> Item:
        """Remove an item and return it.

        Raises:
            ItemNotFoundError: If no item has this ID
        """
        with self._lock:
            item = self._items.pop(self._index_of(item_id))
            logger.info(f"Deleted item {item_id}")
            return item
