"""
Turns raw, loosely structured rows (e.g. from a JSON export) into contacts.

A row is first checked for shape with pydantic, then every value goes
through the same validating constructors the rest of the package uses, so a
row either becomes a fully valid `Contact` or a single `ValidationError`.
"""

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as SchemaError
from pydantic.functional_validators import field_validator
from returns.result import Failure, Result, Success

from ..domain.contact import (
    Contact,
    EmailContactInfo,
    PostalAddress,
    PostalContactInfo,
    build_contact_info,
)
from ..domain.wrappers import EmailAddress, PersonalName
from ..errors import ReasonCode, ValidationError

_POSTAL_FIELDS = ("line1", "city", "state", "zip")


class ContactRecord(BaseModel):
    """The raw shape of one contact row. Values are unvalidated strings."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="ignore")

    first_name: str = Field(..., description="Given name.")
    last_name: str = Field(..., description="Family name.")
    middle_initial: str | None = Field(default=None, description="Optional single-letter initial.")
    email: str | None = Field(default=None, description="Email address, if the contact has one.")
    line1: str | None = Field(default=None, description="First address line.")
    line2: str | None = Field(default=None, description="Second address line; may be empty.")
    city: str | None = None
    state: str | None = None
    zip: str | None = None

    @field_validator(
        "middle_initial", "email", "line1", "line2", "city", "state", "zip", mode="before"
    )
    @classmethod
    def blank_as_missing(cls, v: Any) -> Any:
        """Treat empty strings in optional columns as absent values."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def has_postal_fields(self) -> bool:
        return any(getattr(self, name) is not None for name in _POSTAL_FIELDS)

    def missing_postal_fields(self) -> list[str]:
        return [name for name in _POSTAL_FIELDS if getattr(self, name) is None]


def _parse_record(raw: Mapping[str, Any]) -> Result[ContactRecord, ValidationError]:
    try:
        return Success(ContactRecord.model_validate(raw))
    except SchemaError as e:
        summary = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        return Failure(ValidationError(ReasonCode.MALFORMED_RECORD, repr(raw), detail=summary))


def _email_part(record: ContactRecord) -> Result[EmailContactInfo | None, ValidationError]:
    if record.email is None:
        return Success(None)
    return (
        EmailAddress.create(record.email)
        .map(EmailContactInfo)
        .alt(lambda err: err.for_field("email"))
    )


def _postal_part(record: ContactRecord) -> Result[PostalContactInfo | None, ValidationError]:
    if not record.has_postal_fields():
        return Success(None)
    missing = record.missing_postal_fields()
    if missing:
        return Failure(
            ValidationError(
                ReasonCode.MALFORMED_RECORD,
                "",
                field=missing[0],
                detail="postal address fields must be given together",
            )
        )
    return PostalAddress.create(
        record.line1 or "",
        record.line2 or "",
        record.city or "",
        record.state or "",
        record.zip or "",
    ).map(PostalContactInfo)


def record_to_contact(record: ContactRecord) -> Result[Contact, ValidationError]:
    """Validate a shape-checked record into a `Contact`."""
    name_result = PersonalName.create(record.first_name, record.last_name, record.middle_initial)
    return name_result.bind(
        lambda name: _email_part(record).bind(
            lambda email: _postal_part(record).bind(
                lambda postal: build_contact_info(email, postal).map(
                    lambda info: Contact(name, info)
                )
            )
        )
    )


def parse_contact(raw: Any) -> Result[Contact, ValidationError]:
    """Parse one raw row into a `Contact`.

    A row with neither an email nor a postal address fails with
    `NO_CONTACT_METHODS`; a row that is not a mapping of the expected columns
    fails with `MALFORMED_RECORD`.
    """
    if not isinstance(raw, Mapping):
        return Failure(
            ValidationError(
                ReasonCode.MALFORMED_RECORD,
                repr(raw),
                detail=f"expected a mapping, got {type(raw).__name__}",
            )
        )
    return _parse_record(raw).bind(record_to_contact).alt(
        lambda err: err if err.offending_input else _with_input(err, raw)
    )


def _with_input(error: ValidationError, raw: Mapping[str, Any]) -> ValidationError:
    return replace(error, offending_input=repr(dict(raw)))


__all__ = ["ContactRecord", "parse_contact", "record_to_contact"]
