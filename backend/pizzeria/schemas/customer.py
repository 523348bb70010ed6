"""Customer Schemas — contact details with phone-format validation.

Invariants:
    - name, address, phone required and non-blank
    - phone holds only digits, '+', '-', whitespace and parentheses, >= 8 chars
"""

import re

from pydantic import field_validator

from pizzeria.schemas.common import (
    CamelModel, CamelResponse, CamelUpdateModel,
    require_optional_text, require_text,
)

PHONE_PATTERN = re.compile(r"^[0-9+\-\s()]+$")
PHONE_MIN_LENGTH = 8


def is_valid_phone(phone: str) -> bool:
    return bool(PHONE_PATTERN.match(phone)) and len(phone) >= PHONE_MIN_LENGTH


def _check_phone(v: str) -> str:
    if not is_valid_phone(v):
        raise ValueError("Invalid phone number")
    return v


class CustomerCreate(CamelModel):
    name: str
    address: str
    phone: str

    @field_validator("name", "address", "phone")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return require_text(v)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        return _check_phone(v)


class CustomerUpdate(CamelUpdateModel):
    name: str | None = None
    address: str | None = None
    phone: str | None = None

    @field_validator("name", "address", "phone")
    @classmethod
    def strip_text(cls, v: str | None) -> str:
        return require_optional_text(v)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        return _check_phone(v)


class CustomerResponse(CamelResponse):
    id: str
    name: str
    address: str
    phone: str
