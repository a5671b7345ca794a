"""
Domain Services
===============

Use cases built on the keyed repository and domain entities.
"""

from .finance import FinanceApp, PaymentProcessor, get_processor
from .medical import MedicalSystemApp
from .inventory import StoreManager
from .grading import ResultProcessor
from .stock_logger import StockApp, StockLogger

__all__ = [
    "FinanceApp",
    "PaymentProcessor",
    "get_processor",
    "MedicalSystemApp",
    "StoreManager",
    "ResultProcessor",
    "StockApp",
    "StockLogger",
]
