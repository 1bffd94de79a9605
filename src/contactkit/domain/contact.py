"""
The contact model: a name plus a closed variant of contact information.

The business rule "a contact has an email address or a postal address, or
both" is carried by the `ContactInfo` union itself. There is no variant for a
contact with neither, so that state cannot be built. Every update returns a
new `Contact`; nothing here mutates its arguments.

All case analyses over `ContactInfo` end in `assert_never`, so adding a
variant makes the type checker reject every function that does not handle it.
"""

import logging
from dataclasses import dataclass, replace
from typing import Self, assert_never

from returns.result import Failure, Result, Success

from ..errors import ReasonCode, ValidationError
from .wrappers import EmailAddress, PersonalName, StateCode, ZipCode

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EmailContactInfo:
    """An email address and whether its ownership has been confirmed."""

    address: EmailAddress
    is_verified: bool = False


@dataclass(frozen=True, slots=True)
class PostalAddress:
    """A postal address whose state and zip code are already validated."""

    line1: str
    line2: str
    city: str
    state: StateCode
    zip: ZipCode

    @classmethod
    def create(
        cls, line1: str, line2: str, city: str, state: str, zip: str
    ) -> Result[Self, ValidationError]:
        """Build an address from raw strings, validating the state and zip code."""
        state_result = StateCode.create(state).alt(lambda err: err.for_field("state"))
        zip_result = ZipCode.create(zip).alt(lambda err: err.for_field("zip"))
        return state_result.bind(
            lambda state_code: zip_result.map(
                lambda zip_code: cls(line1, line2, city, state_code, zip_code)
            )
        )

    def one_line(self) -> str:
        lines = [line for line in (self.line1, self.line2, self.city) if line]
        return f"{', '.join(lines)}, {self.state} {self.zip}"


@dataclass(frozen=True, slots=True)
class PostalContactInfo:
    """A postal address and whether an address service has validated it."""

    address: PostalAddress
    is_valid: bool = False


@dataclass(frozen=True, slots=True)
class EmailOnly:
    email: EmailContactInfo


@dataclass(frozen=True, slots=True)
class PostalOnly:
    postal: PostalContactInfo


@dataclass(frozen=True, slots=True)
class Both:
    email: EmailContactInfo
    postal: PostalContactInfo


ContactInfo = EmailOnly | PostalOnly | Both


@dataclass(frozen=True, slots=True)
class Contact:
    name: PersonalName
    info: ContactInfo


def contact_from_email(name: PersonalName, raw_email: str) -> Result[Contact, ValidationError]:
    """
    Create an email-only contact from a raw email string.

    Returns:
        `Success(Contact)` with an unverified email, or the `ValidationError`
        from `EmailAddress.create` unchanged.
    """
    return EmailAddress.create(raw_email).map(
        lambda address: Contact(name, EmailOnly(EmailContactInfo(address)))
    )


def contact_from_postal(name: PersonalName, postal: PostalContactInfo) -> Contact:
    """Create a postal-only contact."""
    return Contact(name, PostalOnly(postal))


def with_postal_address(contact: Contact, new_postal: PostalContactInfo) -> Contact:
    """
    Return a copy of `contact` whose postal information is `new_postal`.

    Email information is kept; any previous postal information is discarded:

        EmailOnly(e)   -> Both(e, new_postal)
        PostalOnly(_)  -> PostalOnly(new_postal)
        Both(e, _)     -> Both(e, new_postal)

    `new_postal` is not validated here; it was validated when it was built.
    """
    info: ContactInfo
    match contact.info:
        case EmailOnly(email=email):
            info = Both(email, new_postal)
        case PostalOnly():
            info = PostalOnly(new_postal)
        case Both(email=email):
            info = Both(email, new_postal)
        case unreachable:
            assert_never(unreachable)
    logger.debug(
        "Postal address update: %s -> %s", type(contact.info).__name__, type(info).__name__
    )
    return replace(contact, info=info)


def with_email_address(contact: Contact, new_email: EmailAddress) -> Contact:
    """
    Return a copy of `contact` whose email address is `new_email`.

    Postal information is kept. A changed address is always unverified; setting
    the address a contact already has keeps its verification flag.
    """
    info: ContactInfo
    match contact.info:
        case EmailOnly(email=email):
            info = EmailOnly(_replace_email(email, new_email))
        case PostalOnly(postal=postal):
            info = Both(EmailContactInfo(new_email), postal)
        case Both(email=email, postal=postal):
            info = Both(_replace_email(email, new_email), postal)
        case unreachable:
            assert_never(unreachable)
    logger.debug(
        "Email address update: %s -> %s", type(contact.info).__name__, type(info).__name__
    )
    return replace(contact, info=info)


def _replace_email(current: EmailContactInfo, new_email: EmailAddress) -> EmailContactInfo:
    if current.address == new_email:
        return current
    return EmailContactInfo(new_email)


def mark_email_verified(contact: Contact, verified: bool = True) -> Contact:
    """Record the outcome of an email verification; contacts without email are returned as-is."""
    match contact.info:
        case EmailOnly(email=email):
            return replace(contact, info=EmailOnly(replace(email, is_verified=verified)))
        case PostalOnly():
            return contact
        case Both(email=email, postal=postal):
            return replace(contact, info=Both(replace(email, is_verified=verified), postal))
        case unreachable:
            assert_never(unreachable)


def mark_postal_validated(contact: Contact, valid: bool = True) -> Contact:
    """Record the outcome of a postal address validation; contacts without postal info are returned as-is."""
    match contact.info:
        case EmailOnly():
            return contact
        case PostalOnly(postal=postal):
            return replace(contact, info=PostalOnly(replace(postal, is_valid=valid)))
        case Both(email=email, postal=postal):
            return replace(contact, info=Both(email, replace(postal, is_valid=valid)))
        case unreachable:
            assert_never(unreachable)


def email_info(info: ContactInfo) -> EmailContactInfo | None:
    match info:
        case EmailOnly(email=email) | Both(email=email):
            return email
        case PostalOnly():
            return None
        case unreachable:
            assert_never(unreachable)


def postal_info(info: ContactInfo) -> PostalContactInfo | None:
    match info:
        case PostalOnly(postal=postal) | Both(postal=postal):
            return postal
        case EmailOnly():
            return None
        case unreachable:
            assert_never(unreachable)


def build_contact_info(
    email: EmailContactInfo | None, postal: PostalContactInfo | None
) -> Result[ContactInfo, ValidationError]:
    """Pick the variant matching the parts that are present; neither is a failure."""
    if email is not None and postal is not None:
        return Success(Both(email, postal))
    if email is not None:
        return Success(EmailOnly(email))
    if postal is not None:
        return Success(PostalOnly(postal))
    return Failure(ValidationError(ReasonCode.NO_CONTACT_METHODS, ""))


__all__ = [
    "Both",
    "Contact",
    "ContactInfo",
    "EmailContactInfo",
    "EmailOnly",
    "PostalAddress",
    "PostalContactInfo",
    "PostalOnly",
    "build_contact_info",
    "contact_from_email",
    "contact_from_postal",
    "email_info",
    "mark_email_verified",
    "mark_postal_validated",
    "postal_info",
    "with_email_address",
    "with_postal_address",
]
