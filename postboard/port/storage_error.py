"""
Structured failures raised by repository implementations.
"""
from enum import Enum
from typing import Any, Dict, Optional


class StorageErrorCode(str, Enum):
    UNIQUE_VIOLATION = "unique_violation"
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    RECORD_NOT_FOUND = "record_not_found"
    UNKNOWN = "unknown"


class StorageError(Exception):
    """
    Raised by a repository when the store rejects an operation.

    ``meta`` carries code specific details: ``target`` (list of request field
    names) for unique violations and ``field_name`` for foreign-key
    violations.
    """
    def __init__(self, message: str, code: StorageErrorCode, meta: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.meta = meta or {}
