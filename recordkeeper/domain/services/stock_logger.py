"""
Stock Logger Service
====================

Appends stock records to an in-memory log and saves / loads the whole log
as an indented JSON array.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Generic, List, Type, TypeVar, Union

import orjson
from pydantic import BaseModel, TypeAdapter, ValidationError

from ...infrastructure.json_io import json_dump, json_load
from ..entities import StockItem
from ..exceptions import DomainException, StorageError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class StockLogger(Generic[ModelT]):
    """JSON-backed log of records"""

    def __init__(self, path: Union[str, Path], item_type: Type[ModelT] = StockItem):
        self.file_path = Path(path)
        self.item_type = item_type
        self._adapter = TypeAdapter(List[item_type])
        self._log: List[ModelT] = []

    def add(self, item: ModelT) -> None:
        self._log.append(item)

    def get_all(self) -> List[ModelT]:
        return list(self._log)

    def save_to_file(self) -> None:
        """Write the whole log to the JSON file"""
        data = [item.model_dump(mode="json", by_alias=True) for item in self._log]
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            json_dump(self.file_path, data)
        except (OSError, TypeError) as e:
            raise StorageError(str(self.file_path), "save", str(e)) from e

        logger.info(f"Stock log saved: {len(self._log)} items in {self.file_path}")

    def load_from_file(self) -> bool:
        """Replace the log with the file contents.

        Returns False when the file does not exist; the current log is kept.
        """
        if not self.file_path.exists():
            logger.warning(f"No data file found at {self.file_path}")
            return False

        try:
            raw = json_load(self.file_path)
            items = self._adapter.validate_python([] if raw is None else raw)
        except orjson.JSONDecodeError as e:
            raise StorageError(str(self.file_path), "load", f"invalid JSON: {e}") from e
        except ValidationError as e:
            raise StorageError(str(self.file_path), "load", f"invalid record: {e}") from e
        except OSError as e:
            raise StorageError(str(self.file_path), "load", str(e)) from e

        self._log = list(items)
        logger.info(f"Stock log loaded: {len(self._log)} items from {self.file_path}")
        return True


class StockApp:
    """Stock logging demo"""

    def __init__(self, path: Union[str, Path], date_format: str = "%Y-%m-%d"):
        self.logger: StockLogger[StockItem] = StockLogger(path, StockItem)
        self.date_format = date_format

    def seed_sample_data(self) -> None:
        """Load initial example stock"""
        now = datetime.now()
        samples = [
            (101, "Desk Lamp", 8),
            (102, "Office Chair", 12),
            (103, "Filing Cabinet", 5),
            (104, "Whiteboard", 4),
            (105, "Projector", 2),
        ]
        for item_id, name, quantity in samples:
            self.logger.add(StockItem(id=item_id, name=name, quantity=quantity, date_added=now))

    def save_data(self) -> str:
        try:
            self.logger.save_to_file()
        except DomainException as e:
            logger.error(f"Error saving data: {e.message}")
            return f"Error saving data: {e.message}"
        return "Data saved successfully."

    def load_data(self) -> str:
        try:
            loaded = self.logger.load_from_file()
        except DomainException as e:
            logger.error(f"Error loading data: {e.message}")
            return f"Error loading data: {e.message}"
        if not loaded:
            return "No data file found."
        return "Data loaded successfully."

    def print_all_items(self) -> List[str]:
        return [item.display(self.date_format) for item in self.logger.get_all()]
