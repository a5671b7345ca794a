"""
Inventory Service
=================

Typed stock repositories for electronics and groceries. Stock changes are
reported back as console lines; repository failures are logged and turned
into ``[Error]`` lines instead of propagating.
"""

import logging
from datetime import date, timedelta
from typing import List, TypeVar

from ..entities import FoodProduct, InventoryItem, TechProduct
from ..exceptions import DomainException
from ..repository import KeyedRepository

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=InventoryItem)


class StoreManager:
    """Manages the electronics and groceries repositories"""

    def __init__(self):
        self.electronics: KeyedRepository[TechProduct] = KeyedRepository()
        self.groceries: KeyedRepository[FoodProduct] = KeyedRepository()

    def seed_data(self) -> None:
        """Load initial stock"""
        self.electronics.add(TechProduct(id=10, name="Tablet", quantity=12, brand="Apple", warranty_months=18))
        self.electronics.add(TechProduct(id=11, name="Smartwatch", quantity=8, brand="Garmin", warranty_months=24))

        today = date.today()
        self.groceries.add(FoodProduct(id=201, name="Yoghurt", quantity=25, expiry_date=today + timedelta(days=10)))
        self.groceries.add(FoodProduct(id=202, name="Eggs", quantity=50, expiry_date=today + timedelta(days=14)))

    def print_all_items(self, repo: KeyedRepository[ItemT]) -> List[str]:
        return [str(item) for item in repo.get_all()]

    def increase_stock(self, repo: KeyedRepository[ItemT], item_id: int, quantity: int) -> str:
        """Add units to an item, reporting failures as an error line"""
        try:
            item = repo.get_by_id(item_id)
            new_quantity = item.quantity + quantity
            repo.update_quantity(item_id, new_quantity)
        except DomainException as e:
            logger.warning(f"Stock increase failed for {item_id}: {e.message}")
            return f"[Error] {e.message}"

        return f"Stock updated: {item.name} now has {new_quantity} units."

    def remove_item_by_id(self, repo: KeyedRepository[ItemT], item_id: int) -> str:
        try:
            repo.remove(item_id)
        except DomainException as e:
            logger.warning(f"Removal failed for {item_id}: {e.message}")
            return f"[Error] {e.message}"

        return f"Item with ID {item_id} removed."
