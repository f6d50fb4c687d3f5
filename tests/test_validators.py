import pytest

from contact_relay.form.validators import (
    INVALID_EMAIL_MESSAGE,
    INVALID_PHONE_MESSAGE,
    REQUIRED_MESSAGE,
    Field,
    FieldKind,
    validate,
)


@pytest.mark.parametrize("value", ["", "   ", "\t\n"])
def test_required_field_rejects_blank(value):
    result = validate(Field("name", FieldKind.TEXT, required=True, value=value))
    assert not result.valid
    assert result.message == REQUIRED_MESSAGE


def test_required_field_accepts_any_text():
    result = validate(Field("inquiryType", FieldKind.SELECT, required=True, value="General"))
    assert result.valid
    assert result.message is None


@pytest.mark.parametrize("value", ["a@b.com", "first.last@mail.example.org", "  jo@x.com  "])
def test_valid_emails(value):
    assert validate(Field("email", FieldKind.EMAIL, value=value)).valid


@pytest.mark.parametrize("value", ["a@b", "ab.com", "a b@c.com", "a@@b.com", "@b.com"])
def test_invalid_emails(value):
    result = validate(Field("email", FieldKind.EMAIL, value=value))
    assert not result.valid
    assert result.message == INVALID_EMAIL_MESSAGE


def test_optional_empty_email_is_valid():
    assert validate(Field("email", FieldKind.EMAIL, value="")).valid


def test_required_wins_over_format_rule():
    result = validate(Field("email", FieldKind.EMAIL, required=True, value=" "))
    assert result.message == REQUIRED_MESSAGE


@pytest.mark.parametrize("value", ["+14155551234", "98765 43210", "+91 98765 43210", "7"])
def test_valid_phone_numbers(value):
    assert validate(Field("phone", FieldKind.TELEPHONE, value=value)).valid


@pytest.mark.parametrize("value", ["0123", "abc", "+0123", "12345678901234567", "555-1234", "1١٢٣", "１２３"])
def test_invalid_phone_numbers(value):
    result = validate(Field("phone", FieldKind.TELEPHONE, value=value))
    assert not result.valid
    assert result.message == INVALID_PHONE_MESSAGE


def test_format_rules_only_apply_to_their_kind():
    assert validate(Field("message", FieldKind.TEXTAREA, value="not an email")).valid
    assert validate(Field("name", FieldKind.TEXT, value="abc")).valid


def test_validation_is_idempotent():
    field = Field("phone", FieldKind.TELEPHONE, value="0123")
    assert validate(field) == validate(field)
    assert field.value == "0123"
