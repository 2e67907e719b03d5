"""Domain value objects for Chirp.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re

from pydantic import EmailStr, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from chirp.domain.value.common import RootValueObject, ValueObject
from chirp.domain.value.identifiers import UserId

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]{3,50}$")
EMAIL_ADAPTER = TypeAdapter(EmailStr)


class Username(RootValueObject[str]):
    """Public username.

    3-50 characters of letters, digits, underscore, dot or hyphen.
    Examples: 'ada', 'grace.hopper', 'alan_t'
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not USERNAME_PATTERN.match(v):
            raise ValueError(
                "Username must be 3-50 characters of letters, digits, '_', '.' or '-'"
            )
        return v


class Email(RootValueObject[str]):
    """Email address, normalised to lower case."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email syntax and normalise case."""
        try:
            v = EMAIL_ADAPTER.validate_python(v.strip())
        except PydanticValidationError:
            raise ValueError("Invalid email address")
        return v.lower()


class Caller(ValueObject):
    """Authenticated identity attached to a request.

    Built only from a verified token; never partially populated.
    """

    user_id: UserId
    username: str
