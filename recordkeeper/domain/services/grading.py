"""
Grade Report Service
====================

Reads learners from a comma-separated text file and writes a grade report.

Input lines have exactly three fields, ``id,fullName,score``; whitespace
around fields is trimmed. The first malformed line aborts the read.
"""

import logging
import re
from pathlib import Path
from typing import List, Union

from ..entities import Learner
from ..exceptions import InvalidFormatError, MissingFieldError, StorageError

logger = logging.getLogger(__name__)

FIELD_COUNT = 3
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_int(raw: str, field: str) -> int:
    value = raw.strip()
    if not INTEGER_PATTERN.fullmatch(value):
        raise InvalidFormatError(field, raw)
    return int(value)


class ResultProcessor:
    """Parses learner files and writes grade reports"""

    def parse_line(self, line: str) -> Learner:
        """Parse a single ``id,fullName,score`` line"""
        parts = line.split(",")
        if len(parts) != FIELD_COUNT:
            raise MissingFieldError(line, FIELD_COUNT, len(parts))

        learner_id = _parse_int(parts[0], "ID")
        full_name = parts[1].strip()
        score = _parse_int(parts[2], "score")

        return Learner(id=learner_id, full_name=full_name, score=score)

    def read_from_file(self, input_path: Union[str, Path]) -> List[Learner]:
        """Read and validate all learners from a file.

        Raises:
            StorageError: if the file cannot be opened or read
            MissingFieldError: if a line does not have three fields
            InvalidFormatError: if an id or score is not an integer
        """
        learners = []
        try:
            with open(input_path, "r", encoding="utf-8-sig") as f:
                for line in f:
                    learners.append(self.parse_line(line.rstrip("\r\n")))
        except FileNotFoundError as e:
            raise StorageError(str(input_path), "read", "Input file not found.") from e
        except UnicodeDecodeError as e:
            raise StorageError(str(input_path), "read", f"not valid UTF-8 text: {e}") from e
        except OSError as e:
            raise StorageError(str(input_path), "read", str(e)) from e

        logger.info(f"Read {len(learners)} learners from {input_path}")
        return learners

    def write_to_file(self, learners: List[Learner], output_path: Union[str, Path]) -> None:
        """Write one report line per learner"""
        path = Path(output_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as f:
                for learner in learners:
                    f.write(learner.report_line() + "\n")
        except OSError as e:
            raise StorageError(str(output_path), "write", str(e)) from e

        logger.info(f"Grade report for {len(learners)} learners written to {output_path}")
