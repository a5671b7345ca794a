"""
Medical System Service
======================

Keeps clients and medication orders in keyed repositories and groups
orders by client for display.
"""

import logging
from datetime import datetime, timedelta
from typing import Dict, List

from ..entities import Client, MedicationOrder
from ..repository import KeyedRepository

logger = logging.getLogger(__name__)


class MedicalSystemApp:
    """Client and prescription demo"""

    def __init__(self):
        self.client_repository: KeyedRepository[Client] = KeyedRepository(entity_name="Client")
        self.order_repository: KeyedRepository[MedicationOrder] = KeyedRepository(entity_name="MedicationOrder")
        self.order_map: Dict[int, List[MedicationOrder]] = {}

    def load_sample_data(self) -> None:
        """Load initial clients and prescriptions"""
        self.client_repository.add(Client(id=101, full_name="David Owusu", age=34, gender="Male"))
        self.client_repository.add(Client(id=102, full_name="Mary Abena", age=29, gender="Female"))
        self.client_repository.add(Client(id=103, full_name="Kwame Mensah", age=52, gender="Male"))

        now = datetime.now()
        orders = [
            (201, 101, "Azithromycin", 4),
            (202, 101, "Ciprofloxacin", 1),
            (203, 102, "Vitamin C", 6),
            (204, 103, "Ibuprofen", 2),
            (205, 101, "Loratadine", 3),
        ]
        for order_id, client_id, drug_name, days_ago in orders:
            self.order_repository.add(MedicationOrder(
                id=order_id,
                client_id=client_id,
                drug_name=drug_name,
                date_issued=now - timedelta(days=days_ago),
            ))

        logger.info(
            f"Sample data loaded: {len(self.client_repository)} clients, "
            f"{len(self.order_repository)} orders"
        )

    def generate_order_map(self) -> Dict[int, List[MedicationOrder]]:
        """Group prescriptions by client ID, rebuilding the map from scratch"""
        self.order_map.clear()

        for order in self.order_repository.get_all():
            self.order_map.setdefault(order.client_id, []).append(order)

        return self.order_map

    def show_all_clients(self) -> List[str]:
        lines = ["=== Client List ==="]
        lines.extend(str(client) for client in self.client_repository.get_all())
        return lines

    def show_orders_for_client(self, client_id: int) -> List[str]:
        orders = self.order_map.get(client_id)
        if not orders:
            return [f"No medication orders found for Client ID {client_id}."]

        lines = [f"=== Medication Orders for Client ID {client_id} ==="]
        lines.extend(str(order) for order in orders)
        return lines
