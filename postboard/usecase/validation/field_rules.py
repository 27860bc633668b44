"""
Declarative field rules for untyped JSON request bodies.

A body is decoded against an ordered tuple of ``FieldRule``. All fields are
evaluated and every violation is reported, in declaration order. Within a
single field evaluation stops at the first failing check, except for date
fields where the non-empty and format diagnostics are reported together.
"""
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from email_validator import EmailNotValidError, validate_email

from ...domain.error.service_errors import InputValidationError, ValidationErrorEntry
from ...domain.result import Err, Ok, Result

MISSING_BODY_MESSAGE = "Missing request body! Please send a JSON body with the request."
INVALID_VALUE_MESSAGE = "Invalid value"
MAX_EMAIL_LENGTH = 254
# ids are stored as 32-bit integer keys
MAX_RECORD_ID = 2_147_483_647

_MISSING = object()


class FieldType(str, Enum):
    STRING = "string"
    EMAIL = "email"
    DATE = "date"
    INTEGER = "integer"


@dataclass(frozen=True)
class FieldRule:
    name: str
    field_type: FieldType = FieldType.STRING
    required: bool = False
    empty_message: Optional[str] = None
    max_length: Optional[int] = None
    length_message: Optional[str] = None
    format_message: Optional[str] = None
    minimum: Optional[int] = None
    maximum: Optional[int] = None


def parse_iso_date(value: str) -> Optional[date]:
    """YYYY-MM-DD or a full ISO-8601 datetime, truncated to its date."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def _entry(rule: FieldRule, msg: str, value: Any) -> ValidationErrorEntry:
    return ValidationErrorEntry(
        location="body",
        msg=msg,
        path=rule.name,
        type="field",
        value=None if value is _MISSING else value,
    )


def _check_string(rule: FieldRule, value: Any) -> Tuple[List[ValidationErrorEntry], Any]:
    if not isinstance(value, str):
        return [_entry(rule, INVALID_VALUE_MESSAGE, value)], _MISSING

    trimmed = value.strip()
    if not trimmed:
        return [_entry(rule, rule.empty_message or INVALID_VALUE_MESSAGE, value)], _MISSING
    if rule.max_length is not None and len(trimmed) > rule.max_length:
        return [_entry(rule, rule.length_message or INVALID_VALUE_MESSAGE, value)], _MISSING
    return [], trimmed


def _check_email(rule: FieldRule, value: Any) -> Tuple[List[ValidationErrorEntry], Any]:
    if not isinstance(value, str):
        return [_entry(rule, INVALID_VALUE_MESSAGE, value)], _MISSING

    message = rule.format_message or INVALID_VALUE_MESSAGE
    if len(value) > MAX_EMAIL_LENGTH:
        return [_entry(rule, message, value)], _MISSING
    try:
        validate_email(value, check_deliverability=False, test_environment=True)
    except EmailNotValidError:
        return [_entry(rule, message, value)], _MISSING
    return [], value


def _check_date(rule: FieldRule, value: Any) -> Tuple[List[ValidationErrorEntry], Any]:
    if not isinstance(value, str):
        return [_entry(rule, INVALID_VALUE_MESSAGE, value)], _MISSING

    parsed = parse_iso_date(value.strip())
    if parsed is None:
        return [
            _entry(rule, rule.empty_message or INVALID_VALUE_MESSAGE, value),
            _entry(rule, rule.format_message or INVALID_VALUE_MESSAGE, value),
        ], _MISSING
    return [], parsed


def _check_integer(rule: FieldRule, value: Any) -> Tuple[List[ValidationErrorEntry], Any]:
    message = rule.format_message or INVALID_VALUE_MESSAGE
    if isinstance(value, bool):
        return [_entry(rule, message, value)], _MISSING

    if isinstance(value, str) and value.isascii() and value.isdigit():
        number = int(value)
    elif isinstance(value, int):
        number = value
    else:
        return [_entry(rule, message, value)], _MISSING

    if rule.minimum is not None and number < rule.minimum:
        return [_entry(rule, message, value)], _MISSING
    if rule.maximum is not None and number > rule.maximum:
        return [_entry(rule, message, value)], _MISSING
    return [], number


_CHECKS = {
    FieldType.STRING: _check_string,
    FieldType.EMAIL: _check_email,
    FieldType.DATE: _check_date,
    FieldType.INTEGER: _check_integer,
}


def check_field(rule: FieldRule, body: Dict[str, Any]) -> Tuple[List[ValidationErrorEntry], Any]:
    """
    Evaluates one rule against the body.

    Returns the violations and the sanitized value (trimmed string, parsed
    date or int). The value is ``_MISSING`` when the field is absent or
    invalid.
    """
    if rule.name not in body:
        if rule.required:
            message = rule.format_message or f"Missing required input: {rule.name}"
            return [_entry(rule, message, _MISSING)], _MISSING
        return [], _MISSING

    return _CHECKS[rule.field_type](rule, body[rule.name])


def decode_body(body: Any, rules: Sequence[FieldRule]) -> Result[Dict[str, Any]]:
    """
    Decodes a raw JSON body into a dict holding only the declared fields that
    were sent, with sanitized values.
    """
    if not isinstance(body, dict) or not body:
        entry = ValidationErrorEntry(location="body", msg=MISSING_BODY_MESSAGE, type="field")
        return Err(InputValidationError("Missing request body.", [entry]))

    errors: List[ValidationErrorEntry] = []
    decoded: Dict[str, Any] = {}
    for rule in rules:
        field_errors, value = check_field(rule, body)
        errors.extend(field_errors)
        if value is not _MISSING:
            decoded[rule.name] = value

    if errors:
        return Err(InputValidationError("Invalid request body.", errors))
    return Ok(decoded)
