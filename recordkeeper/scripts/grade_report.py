#!/usr/bin/env python3
"""
Grade report: read learners from RECORDKEEPER_LEARNERS_FILE and write the
report to RECORDKEEPER_GRADE_REPORT_FILE (both under RECORDKEEPER_DATA_DIR).

Usage:
  recordkeeper-grades
"""
from __future__ import annotations

from recordkeeper.domain.exceptions import (
    DomainException,
    InvalidFormatError,
    MissingFieldError,
    StorageError,
)
from recordkeeper.domain.services.grading import ResultProcessor
from recordkeeper.infrastructure.config import get_config
from recordkeeper.infrastructure.logging_config import setup_logging


def main() -> None:
    config = get_config()
    setup_logging(config.logging)

    processor = ResultProcessor()
    try:
        learners = processor.read_from_file(config.paths.learners_path)
        processor.write_to_file(learners, config.paths.grade_report_path)
        print("Report generated successfully!")
    except StorageError as e:
        print(f"Storage error: {e.reason}")
    except InvalidFormatError as e:
        print(f"Invalid score error: {e.message}")
    except MissingFieldError as e:
        print(f"Missing field error: {e.message}")
    except DomainException as e:
        print(f"Unexpected error: {e.message}")


if __name__ == "__main__":
    main()
