#!/usr/bin/env python3
"""
Medical demo: list clients, then show the prescriptions of a client id
read from standard input.

Usage:
  recordkeeper-medical
"""
from __future__ import annotations

from recordkeeper.domain.services.grading import INTEGER_PATTERN
from recordkeeper.domain.services.medical import MedicalSystemApp
from recordkeeper.infrastructure.config import get_config
from recordkeeper.infrastructure.logging_config import setup_logging


def main() -> None:
    config = get_config()
    setup_logging(config.logging)

    app = MedicalSystemApp()
    app.load_sample_data()
    app.generate_order_map()
    for line in app.show_all_clients():
        print(line)
    print()

    try:
        raw = input("Enter Client ID to view prescriptions: ").strip()
    except EOFError:
        raw = ""
    if not INTEGER_PATTERN.fullmatch(raw):
        print("Invalid input. Please enter a number.")
        return
    client_id = int(raw)

    for line in app.show_orders_for_client(client_id):
        print(line)


if __name__ == "__main__":
    main()
