"""
リクエストボディ検証ルールのテスト

フィールド宣言順に全違反を収集すること、フィールド内では最初の失敗で
打ち切ること、日付フィールドは2つの診断を同時に返すことを検証する。
"""
from datetime import date

from postboard.domain.error.service_errors import ErrorKind
from postboard.domain.result import Err, Ok
from postboard.infra.rest_api.request_validation import (
    INVALID_ID_MESSAGE,
    POST_REQUEST_RULES,
    USER_REQUEST_RULES,
    parse_id_parameter,
)
from postboard.usecase.validation.field_rules import (
    INVALID_VALUE_MESSAGE,
    MAX_RECORD_ID,
    MISSING_BODY_MESSAGE,
    decode_body,
    parse_iso_date,
)

VALID_USER = {
    "fullName": "John Doe",
    "email": "john.doe@email.com",
    "username": "johndoe1377",
    "dateOfBirth": "1970-01-01",
}


def messages(result):
    assert isinstance(result, Err)
    return [entry.msg for entry in result.error.errors]


class TestBodyShape:
    def test_missing_body(self):
        result = decode_body(None, USER_REQUEST_RULES)

        assert messages(result) == [MISSING_BODY_MESSAGE]
        assert result.error.kind == ErrorKind.INPUT_VALIDATION

    def test_empty_object(self):
        assert messages(decode_body({}, USER_REQUEST_RULES)) == [MISSING_BODY_MESSAGE]

    def test_non_object_skips_field_rules(self):
        """userId は必須だが、ボディ不正時は単一エラーのみ"""
        assert messages(decode_body([1, 2], POST_REQUEST_RULES)) == [MISSING_BODY_MESSAGE]
        assert messages(decode_body("text", POST_REQUEST_RULES)) == [MISSING_BODY_MESSAGE]


class TestUserRules:
    def test_valid_body_is_sanitized(self):
        body = dict(VALID_USER, fullName="  John Doe  ")

        result = decode_body(body, USER_REQUEST_RULES)

        assert isinstance(result, Ok)
        assert result.value["fullName"] == "John Doe"
        assert result.value["dateOfBirth"] == date(1970, 1, 1)

    def test_unknown_keys_are_dropped(self):
        result = decode_body({"username": "max", "bogusField": "x"}, USER_REQUEST_RULES)

        assert result.value == {"username": "max"}

    def test_full_name_too_long(self):
        result = decode_body(dict(VALID_USER, fullName="X" * 256), USER_REQUEST_RULES)

        assert messages(result) == ["fullName must be between 1 and 255 characters."]
        assert result.error.errors[0].path == "fullName"

    def test_blank_string_fails_non_empty(self):
        result = decode_body(dict(VALID_USER, username="   "), USER_REQUEST_RULES)

        assert messages(result) == ["username must not be empty or contain blanks."]

    def test_username_length(self):
        result = decode_body(dict(VALID_USER, username="a" * 16), USER_REQUEST_RULES)

        assert messages(result) == ["username must be less than or equal 15 characters."]

    def test_type_failure_skips_remaining_rules_for_field(self):
        result = decode_body(dict(VALID_USER, fullName=42), USER_REQUEST_RULES)

        assert messages(result) == [INVALID_VALUE_MESSAGE]
        assert result.error.errors[0].value == 42

    def test_invalid_email(self):
        assert messages(decode_body(dict(VALID_USER, email="not-an-email"), USER_REQUEST_RULES)) == [
            "Invalid email provided."
        ]

    def test_test_domain_email_is_accepted(self):
        result = decode_body(dict(VALID_USER, email="user@host.test"), USER_REQUEST_RULES)

        assert result.value["email"] == "user@host.test"

    def test_dotless_domain_email_is_rejected(self):
        assert messages(decode_body(dict(VALID_USER, email="user@localhost"), USER_REQUEST_RULES)) == [
            "Invalid email provided."
        ]

    def test_email_longer_than_254(self):
        email = "a" * 64 + "@" + ".".join(["b" * 60] * 4) + ".com"

        assert len(email) > 254
        assert messages(decode_body(dict(VALID_USER, email=email), USER_REQUEST_RULES)) == [
            "Invalid email provided."
        ]

    def test_invalid_date_reports_both_diagnostics(self):
        result = decode_body(dict(VALID_USER, dateOfBirth="not-a-date"), USER_REQUEST_RULES)

        assert messages(result) == [
            "dateOfBirth must be defined as an ISO 8601 string.",
            "dateOfBirth must be a valid date in the format YYYY-MM-DD.",
        ]

    def test_empty_date_reports_both_diagnostics(self):
        assert len(messages(decode_body(dict(VALID_USER, dateOfBirth=" "), USER_REQUEST_RULES))) == 2

    def test_impossible_calendar_date(self):
        assert len(messages(decode_body(dict(VALID_USER, dateOfBirth="1970-02-30"), USER_REQUEST_RULES))) == 2

    def test_all_violations_collected_in_declaration_order(self):
        body = {"dateOfBirth": "nope", "username": "", "email": "x", "fullName": ""}

        result = decode_body(body, USER_REQUEST_RULES)

        assert [e.path for e in result.error.errors] == [
            "fullName", "email", "username", "dateOfBirth", "dateOfBirth",
        ]


class TestPostRules:
    def test_user_id_required(self):
        result = decode_body({"title": "Hello"}, POST_REQUEST_RULES)

        assert messages(result) == [
            "userId must be defined as part of the Post request as a non-negative integer."
        ]

    def test_user_id_must_be_positive_integer(self):
        for value in (0, -3, "abc", 1.5, True):
            result = decode_body({"userId": value, "title": "Hello"}, POST_REQUEST_RULES)
            assert isinstance(result, Err), value

    def test_user_id_beyond_storage_range(self):
        for value in (MAX_RECORD_ID + 1, 99999999999999999999, "99999999999999999999"):
            result = decode_body({"userId": value, "title": "Hello"}, POST_REQUEST_RULES)
            assert messages(result) == [
                "userId must be defined as part of the Post request as a non-negative integer."
            ], value
            assert result.error.errors[0].path == "userId"

    def test_largest_storable_user_id_is_accepted(self):
        result = decode_body({"userId": MAX_RECORD_ID, "title": "Hello"}, POST_REQUEST_RULES)

        assert result.value == {"userId": MAX_RECORD_ID, "title": "Hello"}

    def test_numeric_string_user_id_is_converted(self):
        result = decode_body({"userId": "7", "title": "Hello"}, POST_REQUEST_RULES)

        assert result.value == {"userId": 7, "title": "Hello"}

    def test_description_length(self):
        result = decode_body({"userId": 1, "description": "d" * 141}, POST_REQUEST_RULES)

        assert messages(result) == [
            "description must be between 1 and 140 characters, just like OG Twitter!"
        ]

    def test_title_length(self):
        result = decode_body({"userId": 1, "title": "t" * 21}, POST_REQUEST_RULES)

        assert messages(result) == ["title must be between 1 and 20 characters."]


class TestIdParameter:
    def test_valid_ids(self):
        assert parse_id_parameter("0") == Ok(0)
        assert parse_id_parameter("420") == Ok(420)

    def test_invalid_ids(self):
        for raw in ("bogusId", "-1", "1.5", ""):
            result = parse_id_parameter(raw)
            assert messages(result) == [INVALID_ID_MESSAGE], raw

    def test_only_plain_ascii_digits(self):
        for raw in ("1_0", " 7 ", "+7", "٣"):
            assert messages(parse_id_parameter(raw)) == [INVALID_ID_MESSAGE], raw

    def test_id_beyond_storage_range(self):
        assert parse_id_parameter(str(MAX_RECORD_ID)) == Ok(MAX_RECORD_ID)
        assert messages(parse_id_parameter(str(MAX_RECORD_ID + 1))) == [INVALID_ID_MESSAGE]
        assert messages(parse_id_parameter("99999999999999999999")) == [INVALID_ID_MESSAGE]


def test_parse_iso_date_accepts_datetime():
    assert parse_iso_date("1904-04-22T10:00:00Z") == date(1904, 4, 22)
    assert parse_iso_date("22/04/1904") is None
