"""
入力フィールドの存在チェック

作成操作では全フィールド必須、更新操作では最低1フィールド必須。
値の妥当性ではなくキーの有無のみを判定する。
"""
from typing import Any, List, Mapping, Sequence

from ...domain.error.service_errors import ValidationErrorEntry

AT_LEAST_ONE_FIELD_MESSAGE = "At least one of the input fields must be defined."


def require_all(data: Mapping[str, Any], fields: Sequence[str]) -> List[ValidationErrorEntry]:
    """Returns one entry per field missing from ``data``; empty means valid."""
    return [
        ValidationErrorEntry(
            location="body",
            msg=f"Missing required input: {name}",
            path=name,
            type="field",
        )
        for name in fields
        if name not in data
    ]


def require_at_least_one(data: Mapping[str, Any], fields: Sequence[str]) -> List[ValidationErrorEntry]:
    if any(name in data for name in fields):
        return []

    return [
        ValidationErrorEntry(
            location="body",
            msg=AT_LEAST_ONE_FIELD_MESSAGE,
            path=", ".join(fields),
            type="field",
        )
    ]
