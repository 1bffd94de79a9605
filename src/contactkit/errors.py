"""
The single error kind produced by contactkit's validating constructors.

Validation never raises: every constructor returns a `returns.result.Result`
whose failure side carries a `ValidationError`. The `reason` is a stable,
machine-distinguishable code; `offending_input` is the raw value that was
rejected, so callers can report or log it without re-deriving it.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Self


class ReasonCode(str, Enum):
    """Enumeration of the reasons a raw value can be rejected."""

    EMPTY_STRING = "empty_string"
    MISSING_AT_SIGN = "missing_at_sign"
    MULTIPLE_AT_SIGNS = "multiple_at_signs"
    EMPTY_LOCAL_PART = "empty_local_part"
    EMPTY_DOMAIN = "empty_domain"
    INVALID_MIDDLE_INITIAL = "invalid_middle_initial"
    UNKNOWN_STATE_CODE = "unknown_state_code"
    INVALID_ZIP_LENGTH = "invalid_zip_length"
    NON_DIGIT_ZIP = "non_digit_zip"
    INVALID_PHONE_NUMBER = "invalid_phone_number"
    NO_CONTACT_METHODS = "no_contact_methods"
    MALFORMED_RECORD = "malformed_record"


_MESSAGES: dict[ReasonCode, str] = {
    ReasonCode.EMPTY_STRING: "value must not be empty",
    ReasonCode.MISSING_AT_SIGN: "email address must contain an @ sign",
    ReasonCode.MULTIPLE_AT_SIGNS: "email address must contain exactly one @ sign",
    ReasonCode.EMPTY_LOCAL_PART: "email address is missing the part before the @ sign",
    ReasonCode.EMPTY_DOMAIN: "email address is missing the domain after the @ sign",
    ReasonCode.INVALID_MIDDLE_INITIAL: "middle initial must be a single letter",
    ReasonCode.UNKNOWN_STATE_CODE: "state is not in list",
    ReasonCode.INVALID_ZIP_LENGTH: "zip code must be 5 digits",
    ReasonCode.NON_DIGIT_ZIP: "zip code must contain only digits",
    ReasonCode.INVALID_PHONE_NUMBER: "phone number must contain at least 7 digits",
    ReasonCode.NO_CONTACT_METHODS: "a contact needs at least one contact method",
    ReasonCode.MALFORMED_RECORD: "record does not have the expected shape",
}


@dataclass(frozen=True, slots=True)
class ValidationError:
    """
    Describes why a raw value could not become a domain value.

    Attributes:
        reason: The machine-readable rejection code.
        offending_input: The raw input that was rejected.
        field: The record field the input came from, when known.
        detail: Extra free-form context (e.g. a schema error summary).
    """

    reason: ReasonCode
    offending_input: str
    field: str | None = None
    detail: str | None = None

    @property
    def message(self) -> str:
        text = _MESSAGES[self.reason]
        if self.detail:
            text = f"{text} ({self.detail})"
        return f"{self.field}: {text}" if self.field else text

    def for_field(self, field: str) -> Self:
        """Tag the error with a field name unless a more specific one is already set."""
        if self.field is not None:
            return self
        return replace(self, field=field)

    def __str__(self) -> str:
        return f"{self.message}: {self.offending_input!r}"


__all__ = ["ReasonCode", "ValidationError"]
