"""
ストレージ例外をエラー分類へ変換する

API/DB の内部情報をクライアントへ漏らさないよう、既知の制約違反のみを
固定メッセージのエラーへ変換する。未知のエラーはログ出力後そのまま再送出する。
"""
import logging
from typing import Any, Dict

from ...domain.error.service_errors import (
    MissingResourceErrorEntry,
    MutationError,
    MutationErrorEntry,
    MutationReason,
    NotFoundError,
)
from ...domain.result import Err
from ...port.storage_error import StorageError, StorageErrorCode

logger = logging.getLogger(__name__)

UNKNOWN_FIELDS = "Unknown field(s)"
OWNER_FIELD = "userId"


def format_fields(meta: Dict[str, Any]) -> str:
    """Joins the ``target`` fields of a unique violation."""
    target = meta.get("target")
    if not target:
        return UNKNOWN_FIELDS
    if isinstance(target, str):
        return target
    return ", ".join(str(name) for name in target)


def translate_storage_error(err: StorageError, entity: str) -> Err:
    """
    Maps a repository failure to a taxonomy error.

    Raises ``err`` unchanged when its code is not a known constraint
    violation.
    """
    if err.code == StorageErrorCode.UNIQUE_VIOLATION:
        fields = format_fields(err.meta)
        logger.info("%s unique constraint violation on %s", entity, fields)
        return Err(MutationError(
            f"{entity} cannot be created with given input data.",
            [MutationErrorEntry(
                msg=f"{entity} input contains duplicate identifiers.",
                type="field",
                value=fields,
            )],
        ))

    if err.code == StorageErrorCode.FOREIGN_KEY_VIOLATION:
        field_name = err.meta.get("field_name") or OWNER_FIELD
        logger.info("%s foreign key violation on %s", entity, field_name)
        return Err(MutationError(
            f"{entity} cannot be written as it would violate a foreign key constraint, "
            "i.e. associated User does not exist.",
            [MutationErrorEntry(
                msg="User is not authorized to perform this action.",
                type="field",
                value=field_name,
            )],
            reason=MutationReason.FOREIGN_KEY,
        ))

    if err.code == StorageErrorCode.RECORD_NOT_FOUND:
        return Err(NotFoundError(
            f"Can't find {entity} to update or delete.",
            [MissingResourceErrorEntry(msg=f"{entity} does not exist.")],
        ))

    logger.error("Unhandled storage error for %s: %s", entity, err, exc_info=err)
    raise err
