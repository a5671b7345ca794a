"""
Keyed Repository
================

Generic in-memory store for entities identified by a unique integer key.
The key is taken from each entity by an explicit extraction function,
so any record type can be stored without a shared base class.
"""

import logging
from operator import attrgetter
from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from pydantic import ValidationError

from .exceptions import DuplicateKeyError, NotFoundError, InvalidValueError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class KeyedRepository(Generic[T]):
    """In-memory keyed collection with validated CRUD operations.

    Entities are kept in insertion order; ``get_all`` returns them in that
    order. Failed operations leave the contents unchanged.
    """

    def __init__(self, key: Callable[[T], int] = attrgetter("id"), entity_name: str = "Item"):
        self._key = key
        self.entity_name = entity_name
        self._items: Dict[int, T] = {}

    def add(self, item: T) -> None:
        """Insert an entity under its key"""
        key = self._key(item)
        if key in self._items:
            raise DuplicateKeyError(key, self.entity_name)
        self._items[key] = item
        logger.debug(f"{self.entity_name} {key} added ({len(self._items)} stored)")

    def get_by_id(self, key: int) -> T:
        try:
            return self._items[key]
        except KeyError:
            raise NotFoundError(key, self.entity_name) from None

    def remove(self, key: int) -> None:
        if key not in self._items:
            raise NotFoundError(key, self.entity_name)
        del self._items[key]
        logger.debug(f"{self.entity_name} {key} removed ({len(self._items)} stored)")

    def get_all(self) -> List[T]:
        """Return a snapshot list of all stored entities"""
        return list(self._items.values())

    def update_quantity(self, key: int, new_quantity: int) -> None:
        """Overwrite the entity's quantity in place.

        Raises:
            InvalidValueError: if ``new_quantity`` is negative or rejected by the entity
            NotFoundError: if no entity is stored under ``key``
        """
        if new_quantity < 0:
            raise InvalidValueError("quantity", new_quantity, "Quantity cannot be negative.")

        item = self.get_by_id(key)
        try:
            item.quantity = new_quantity
        except ValidationError as e:
            reason = e.errors()[0].get("msg", str(e))
            raise InvalidValueError("quantity", new_quantity, reason) from e
        logger.debug(f"{self.entity_name} {key} quantity set to {new_quantity}")

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first entity matching ``predicate``, if any"""
        return next((item for item in self._items.values() if predicate(item)), None)

    def exists(self, key: int) -> bool:
        return key in self._items

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.get_all())
