#!/usr/bin/env python3
"""
Finance demo: route three transactions through payment channels and apply
them to a savings account.

Usage:
  recordkeeper-finance
"""
from __future__ import annotations

from recordkeeper.domain.services.finance import FinanceApp
from recordkeeper.infrastructure.config import get_config
from recordkeeper.infrastructure.logging_config import setup_logging


def main() -> None:
    config = get_config()
    setup_logging(config.logging)

    app = FinanceApp(currency_symbol=config.formatting.currency_symbol)
    for line in app.run():
        print(line)


if __name__ == "__main__":
    main()
