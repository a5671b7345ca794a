#!/usr/bin/env python3
"""
Inventory demo: print both stock repositories, then exercise the duplicate,
missing-item and negative-quantity failures.

Usage:
  recordkeeper-inventory
"""
from __future__ import annotations

from recordkeeper.domain.entities import TechProduct
from recordkeeper.domain.exceptions import DuplicateKeyError, InvalidValueError
from recordkeeper.domain.services.inventory import StoreManager
from recordkeeper.infrastructure.config import get_config
from recordkeeper.infrastructure.logging_config import setup_logging


def main() -> None:
    config = get_config()
    setup_logging(config.logging)

    manager = StoreManager()
    manager.seed_data()

    print(" Grocery Items ")
    for line in manager.print_all_items(manager.groceries):
        print(line)

    print("\n Electronic Items ")
    for line in manager.print_all_items(manager.electronics):
        print(line)

    print("\n TEST CASES ")

    try:
        manager.electronics.add(TechProduct(id=10, name="Monitor", quantity=5, brand="LG", warranty_months=18))
    except DuplicateKeyError as e:
        print(f"[Duplicate Error] {e.message}")

    print(manager.remove_item_by_id(manager.groceries, 999))

    try:
        manager.groceries.update_quantity(201, -5)
    except InvalidValueError as e:
        print(f"[Invalid Quantity] {e.reason}")

    print("\n== Final Grocery Inventory ==")
    for line in manager.print_all_items(manager.groceries):
        print(line)


if __name__ == "__main__":
    main()
