"""
Domain Exceptions
=================

Domain-specific exceptions that represent rule violations and error
conditions within record keeping. Every exception carries an ``ErrorKind``
so callers can report failures by kind.
"""

from typing import Optional, Dict, Any

from .value_objects import ErrorKind


class DomainException(Exception):
    """Base exception for all domain-related errors"""

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


# Repository exceptions
class RepositoryException(DomainException):
    """Base exception for keyed repository errors"""
    pass


class DuplicateKeyError(RepositoryException):
    """Raised when an entity is added under a key that is already taken"""

    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, key: int, entity_type: str = "Item"):
        self.key = key
        self.entity_type = entity_type

        message = f"{entity_type} with ID {key} already exists."
        details = {"key": key, "entity_type": entity_type}
        super().__init__(message, details)


class NotFoundError(RepositoryException):
    """Raised when no entity is stored under the requested key"""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, key: int, entity_type: str = "Item"):
        self.key = key
        self.entity_type = entity_type

        message = f"{entity_type} with ID {key} not found."
        details = {"key": key, "entity_type": entity_type}
        super().__init__(message, details)


class InvalidValueError(RepositoryException):
    """Raised when a field update would break an entity invariant"""

    kind = ErrorKind.INVALID_VALUE

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason

        message = f"Invalid value for {field}: {reason}"
        details = {"field": field, "value": value, "reason": reason}
        super().__init__(message, details)


# Record parsing exceptions
class RecordParsingException(DomainException):
    """Base exception for errors while parsing text records"""
    pass


class MissingFieldError(RecordParsingException):
    """Raised when a record line does not have the expected number of fields"""

    kind = ErrorKind.MISSING_FIELD

    def __init__(self, line: str, expected: int, actual: int):
        self.line = line
        self.expected = expected
        self.actual = actual

        message = f'Line is missing fields: "{line}"'
        details = {"line": line, "expected": expected, "actual": actual}
        super().__init__(message, details)


class InvalidFormatError(RecordParsingException):
    """Raised when a numeric record field cannot be parsed"""

    kind = ErrorKind.INVALID_FORMAT

    def __init__(self, field: str, raw_value: str):
        self.field = field
        self.raw_value = raw_value

        message = f'Invalid {field} format: "{raw_value}"'
        details = {"field": field, "raw_value": raw_value}
        super().__init__(message, details)


# Storage exceptions
class StorageError(DomainException):
    """Raised when a file cannot be read, written or (de)serialized"""

    kind = ErrorKind.IO

    def __init__(self, path: str, operation: str, reason: str):
        self.path = path
        self.operation = operation
        self.reason = reason

        message = f"Storage error during {operation} of {path}: {reason}"
        details = {"path": path, "operation": operation, "reason": reason}
        super().__init__(message, details)
