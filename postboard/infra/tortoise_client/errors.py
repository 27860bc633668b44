"""
Tortoise ORM / DB driver exceptions -> StorageError
"""
import re
from typing import Dict, List

from tortoise.exceptions import IntegrityError

from ...port.storage_error import StorageError, StorageErrorCode


def _unique_targets(message: str, table: str, columns: Dict[str, str]) -> List[str]:
    """
    Picks the violated columns out of a driver message, e.g.
    ``UNIQUE constraint failed: user.email`` (SQLite) or
    ``duplicate key value violates unique constraint "user_email_key"``
    (PostgreSQL). Returned names are request field names.
    """
    targets = []
    for column, field_name in columns.items():
        pattern = rf"\b{re.escape(table)}(\.|_){re.escape(column)}(\b|_key)"
        if re.search(pattern, message):
            targets.append(field_name)
    return targets


def integrity_error_to_storage_error(
    exc: IntegrityError,
    table: str,
    columns: Dict[str, str],
    owner_field: str = "userId",
) -> StorageError:
    message = str(exc)
    lowered = message.lower()

    if "foreign key" in lowered:
        return StorageError(
            message,
            StorageErrorCode.FOREIGN_KEY_VIOLATION,
            {"field_name": owner_field},
        )

    if "unique" in lowered or "duplicate key" in lowered:
        return StorageError(
            message,
            StorageErrorCode.UNIQUE_VIOLATION,
            {"target": _unique_targets(message, table, columns)},
        )

    return StorageError(message, StorageErrorCode.UNKNOWN)


def record_not_found(entity: str, record_id: int) -> StorageError:
    return StorageError(
        f"{entity} {record_id} does not exist",
        StorageErrorCode.RECORD_NOT_FOUND,
        {"id": record_id},
    )
