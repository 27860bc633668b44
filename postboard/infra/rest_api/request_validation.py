"""
リクエスト検証

パスの id パラメータとJSONボディを、エンティティ操作を呼ぶ前に検証する。
いずれも Ok/Err を返し、Err の場合はルーターがそのまま 400 を返す。
"""
import json
from typing import Any, Dict

from fastapi import Request

from ...domain.error.service_errors import InputValidationError, ValidationErrorEntry
from ...domain.result import Err, Ok, Result
from ...usecase.validation.field_rules import MAX_RECORD_ID, FieldRule, FieldType, decode_body

INVALID_ID_MESSAGE = "Invalid id parameter. Must be a positive integer."

USER_REQUEST_RULES = (
    FieldRule(
        "fullName",
        empty_message="fullName must not be empty or contain blanks.",
        max_length=255,
        length_message="fullName must be between 1 and 255 characters.",
    ),
    FieldRule(
        "email",
        field_type=FieldType.EMAIL,
        format_message="Invalid email provided.",
    ),
    FieldRule(
        "username",
        empty_message="username must not be empty or contain blanks.",
        max_length=15,
        length_message="username must be less than or equal 15 characters.",
    ),
    FieldRule(
        "dateOfBirth",
        field_type=FieldType.DATE,
        empty_message="dateOfBirth must be defined as an ISO 8601 string.",
        format_message="dateOfBirth must be a valid date in the format YYYY-MM-DD.",
    ),
)

POST_REQUEST_RULES = (
    FieldRule(
        "userId",
        field_type=FieldType.INTEGER,
        required=True,
        minimum=1,
        maximum=MAX_RECORD_ID,
        format_message="userId must be defined as part of the Post request as a non-negative integer.",
    ),
    FieldRule(
        "title",
        empty_message="title must not be empty or contain blanks.",
        max_length=20,
        length_message="title must be between 1 and 20 characters.",
    ),
    FieldRule(
        "description",
        empty_message="description must not be empty or contain blanks.",
        max_length=140,
        length_message="description must be between 1 and 140 characters, just like OG Twitter!",
    ),
)


def parse_id_parameter(raw_id: str) -> Result[int]:
    if not (raw_id.isascii() and raw_id.isdigit()) or int(raw_id) > MAX_RECORD_ID:
        return Err(InputValidationError(
            "Invalid id parameter.",
            [ValidationErrorEntry(msg=INVALID_ID_MESSAGE)],
        ))
    return Ok(int(raw_id))


async def read_json_body(request: Request) -> Any:
    """空または不正なJSONは None（ボディなし）として扱う"""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return None


async def validate_user_request(request: Request) -> Result[Dict[str, Any]]:
    return decode_body(await read_json_body(request), USER_REQUEST_RULES)


async def validate_post_request(request: Request) -> Result[Dict[str, Any]]:
    return decode_body(await read_json_body(request), POST_REQUEST_RULES)
