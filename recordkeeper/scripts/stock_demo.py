#!/usr/bin/env python3
"""
Stock log demo: seed five items, save them to RECORDKEEPER_STOCK_FILE,
reload them into a fresh log and print the result.

Usage:
  recordkeeper-stock
"""
from __future__ import annotations

from recordkeeper.domain.services.stock_logger import StockApp
from recordkeeper.infrastructure.config import get_config
from recordkeeper.infrastructure.logging_config import setup_logging


def main() -> None:
    config = get_config()
    setup_logging(config.logging)

    path = config.paths.stock_path
    date_format = config.formatting.date_format

    app = StockApp(path, date_format=date_format)
    app.seed_sample_data()
    print(app.save_data())

    reloaded = StockApp(path, date_format=date_format)
    print(reloaded.load_data())
    for line in reloaded.print_all_items():
        print(line)


if __name__ == "__main__":
    main()
