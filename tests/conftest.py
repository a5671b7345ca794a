from __future__ import annotations

import logging
import sys
from datetime import date
from pathlib import Path

import pytest

# Ensures the recordkeeper package is importable without an install
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from recordkeeper.domain.entities import FoodProduct, TechProduct  # noqa: E402
from recordkeeper.domain.repository import KeyedRepository  # noqa: E402


@pytest.fixture()
def clean_env(monkeypatch, tmp_path):
    """Run from an empty directory so no .env file or settings env leaks in."""
    for name in (
        "RECORDKEEPER_DATA_DIR",
        "RECORDKEEPER_LEARNERS_FILE",
        "RECORDKEEPER_GRADE_REPORT_FILE",
        "RECORDKEEPER_STOCK_FILE",
        "FORMAT_CURRENCY_SYMBOL",
        "FORMAT_DATE_FORMAT",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path

    package_logger = logging.getLogger("recordkeeper")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)


@pytest.fixture()
def electronics() -> KeyedRepository[TechProduct]:
    repo: KeyedRepository[TechProduct] = KeyedRepository()
    repo.add(TechProduct(id=10, name="Tablet", quantity=12, brand="Apple", warranty_months=18))
    repo.add(TechProduct(id=11, name="Smartwatch", quantity=8, brand="Garmin", warranty_months=24))
    return repo


@pytest.fixture()
def groceries() -> KeyedRepository[FoodProduct]:
    repo: KeyedRepository[FoodProduct] = KeyedRepository()
    repo.add(FoodProduct(id=201, name="Yoghurt", quantity=25, expiry_date=date(2030, 1, 10)))
    repo.add(FoodProduct(id=202, name="Eggs", quantity=50, expiry_date=date(2030, 1, 14)))
    return repo
