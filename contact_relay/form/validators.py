"""Contact form field model and validation rules"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import re

REQUIRED_MESSAGE = "This field is required"
INVALID_EMAIL_MESSAGE = "Please enter a valid email address"
INVALID_PHONE_MESSAGE = "Please enter a valid phone number"

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^\+?[1-9]\d{0,15}$", re.ASCII)
WHITESPACE = re.compile(r"\s")


class FieldKind(str, Enum):
    """Input kinds the contact form renders"""
    TEXT = "text"
    EMAIL = "email"
    TELEPHONE = "telephone"
    SELECT = "select"
    TEXTAREA = "textarea"


@dataclass
class Field:
    """One user-editable input in the contact form"""
    name: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    value: str = ""


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a single field"""
    valid: bool
    message: Optional[str] = None


VALID = ValidationResult(valid=True)


def validate(field: Field) -> ValidationResult:
    """
    Validate a field snapshot. The first failing rule wins.

    Args:
        field: Field to check

    Returns:
        ValidationResult with the error message when invalid
    """
    value = field.value.strip()

    if field.required and not value:
        return ValidationResult(valid=False, message=REQUIRED_MESSAGE)

    if field.kind == FieldKind.EMAIL and value:
        if not EMAIL_PATTERN.match(value):
            return ValidationResult(valid=False, message=INVALID_EMAIL_MESSAGE)

    if field.kind == FieldKind.TELEPHONE and value:
        if not PHONE_PATTERN.match(WHITESPACE.sub("", value)):
            return ValidationResult(valid=False, message=INVALID_PHONE_MESSAGE)

    return VALID
